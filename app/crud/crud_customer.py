# app/crud/crud_customer.py
import logging
from typing import List, Tuple

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app import schemas
from app.core.exceptions import NotFoundError
from app.crud.crud_reservation import reservation as crud_reservation
from app.db.models.customer import Customer as CustomerModel
from app.db.models.reservation import Reservation as ReservationModel
from app.services.name_matcher import parse_name_query

logger = logging.getLogger(__name__)

TOP_CUSTOMERS_LIMIT = 10


def _to_record(db_obj: CustomerModel) -> schemas.Customer:
    return schemas.Customer.model_validate(db_obj)


class CRUDCustomer:
    async def get(self, db: AsyncSession, id: int) -> schemas.Customer:
        result = await db.execute(select(CustomerModel).where(CustomerModel.id == id))
        db_obj = result.scalar_one_or_none()
        if db_obj is None:
            raise NotFoundError("customer", id)
        return _to_record(db_obj)

    async def get_multi(self, db: AsyncSession) -> List[schemas.Customer]:
        result = await db.execute(
            select(CustomerModel).order_by(CustomerModel.last_name, CustomerModel.first_name)
        )
        return [_to_record(c) for c in result.scalars().all()]

    async def persist(self, db: AsyncSession, *, record: schemas.Customer) -> schemas.Customer:
        """
        Insert the record when it has no id yet, otherwise overwrite the stored row.

        There is no conflict detection: concurrent updates of the same
        customer resolve as last write wins.
        """
        fields = record.model_dump(include={"first_name", "last_name", "phone", "notes"})

        if record.id is None:
            db_obj = CustomerModel(**fields)
            db.add(db_obj)
            await db.commit()
            # Only a committed row gives the record its id
            record.assign_id(db_obj.id)
            logger.debug("Inserted customer %s", record.id)
            return record

        result = await db.execute(
            update(CustomerModel).where(CustomerModel.id == record.id).values(**fields)
        )
        if result.rowcount == 0:
            await db.rollback()
            raise NotFoundError("customer", record.id)

        await db.commit()
        logger.debug("Updated customer %s", record.id)
        return record

    async def create(self, db: AsyncSession, *, obj_in: schemas.CustomerCreate) -> schemas.Customer:
        return await self.persist(db, record=schemas.Customer(**obj_in.model_dump()))

    async def update(
        self, db: AsyncSession, *, record: schemas.Customer, obj_in: schemas.CustomerUpdate
    ) -> schemas.Customer:
        data = record.model_dump(exclude={"full_name"})
        data.update(obj_in.model_dump(exclude_unset=True))
        updated = schemas.Customer(**data)
        return await self.persist(db, record=updated)

    async def get_reservations(self, db: AsyncSession, *, record: schemas.Customer) -> List[schemas.Reservation]:
        return await crud_reservation.get_for_customer(db, record.id)

    async def filter_by_one_word(self, db: AsyncSession, *, fragment: str) -> List[schemas.Customer]:
        pattern = f"%{fragment}%"
        result = await db.execute(
            select(CustomerModel).where(
                or_(CustomerModel.first_name.like(pattern), CustomerModel.last_name.like(pattern))
            )
        )
        return [_to_record(c) for c in result.scalars().all()]

    async def search_by_name(self, db: AsyncSession, *, query: str) -> List[schemas.Customer]:
        """
        Find customers whose names contain the words of ``query``.

        One word is looked up in the first or the last name, two words must
        match first and last name respectively. Results come back in store
        order and are not limited.
        """
        name_query = parse_name_query(query)

        if name_query.is_single_word:
            logger.debug("Searching customers by one word %r", name_query.first)
            return await self.filter_by_one_word(db, fragment=name_query.first)

        logger.debug("Searching customers by first %r and last %r", name_query.first, name_query.last)
        first_pattern, last_pattern = name_query.patterns()
        result = await db.execute(
            select(CustomerModel).where(
                and_(CustomerModel.first_name.like(first_pattern), CustomerModel.last_name.like(last_pattern))
            )
        )
        return [_to_record(c) for c in result.scalars().all()]

    async def get_reservation_counts(
        self, db: AsyncSession, *, limit: int = TOP_CUSTOMERS_LIMIT
    ) -> List[Tuple[schemas.Customer, int]]:
        """Customers with the most reservations, paired with their reservation count."""
        num_reservations = func.count(ReservationModel.id).label("num_reservations")
        result = await db.execute(
            select(CustomerModel, num_reservations)
            .join(ReservationModel, CustomerModel.id == ReservationModel.customer_id)
            .group_by(CustomerModel.id)
            .order_by(num_reservations.desc())
            .limit(limit)
        )
        ranking = [(_to_record(c), count) for c, count in result.all()]
        logger.debug("Ranked %d customers by reservation count", len(ranking))
        return ranking

    async def get_top_reservation_holders(self, db: AsyncSession) -> List[schemas.Customer]:
        ranking = await self.get_reservation_counts(db, limit=TOP_CUSTOMERS_LIMIT)
        return [c for c, _ in ranking]


customer = CRUDCustomer()
