# app/crud/crud_reservation.py
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.reservation import Reservation as ReservationModel
from app import schemas

logger = logging.getLogger(__name__)


class CRUDReservation:
    async def get_for_customer(self, db: AsyncSession, customer_id: int) -> List[schemas.Reservation]:
        result = await db.execute(
            select(ReservationModel)
            .where(ReservationModel.customer_id == customer_id)
            .order_by(ReservationModel.start_at)
        )
        return [schemas.Reservation.model_validate(r) for r in result.scalars().all()]

    async def create(
        self, db: AsyncSession, *, customer_id: int, obj_in: schemas.ReservationCreate
    ) -> schemas.Reservation:
        db_obj = ReservationModel(customer_id=customer_id, **obj_in.model_dump())
        db.add(db_obj)
        await db.flush()
        reservation = schemas.Reservation.model_validate(db_obj)
        await db.commit()
        logger.debug("Created reservation %s for customer %s", reservation.id, customer_id)
        return reservation


reservation = CRUDReservation()
