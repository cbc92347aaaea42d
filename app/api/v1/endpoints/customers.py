# app/api/v1/endpoints/customers.py
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, schemas
from app.api import deps
from app.core.exceptions import EmptySearchQueryError, NotFoundError

router = APIRouter()


async def _get_customer_or_404(db: AsyncSession, customer_id: int) -> schemas.Customer:
    try:
        return await crud.customer.get(db, id=customer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/", response_model=List[schemas.Customer])
async def read_customers(db: AsyncSession = Depends(deps.get_db)) -> Any:
    """
    List all customers, ordered by last name then first name.
    """
    return await crud.customer.get_multi(db)


@router.post("/", response_model=schemas.Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(
    *,
    db: AsyncSession = Depends(deps.get_db),
    customer_in: schemas.CustomerCreate,
) -> Any:
    return await crud.customer.create(db, obj_in=customer_in)


@router.get("/search", response_model=List[schemas.Customer])
async def search_customers(
    q: str = Query(..., description="First name, last name, or 'first last'"),
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Search customers by name. One word matches first or last name,
    two words match first and last name.
    """
    try:
        return await crud.customer.search_by_name(db, query=q)
    except EmptySearchQueryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/top", response_model=List[schemas.Customer])
async def read_top_customers(db: AsyncSession = Depends(deps.get_db)) -> Any:
    """
    The ten customers with the most reservations.
    """
    return await crud.customer.get_top_reservation_holders(db)


@router.get("/{customer_id}", response_model=schemas.Customer)
async def read_customer_by_id(customer_id: int, db: AsyncSession = Depends(deps.get_db)) -> Any:
    return await _get_customer_or_404(db, customer_id)


@router.put("/{customer_id}", response_model=schemas.Customer)
async def update_customer(
    *,
    db: AsyncSession = Depends(deps.get_db),
    customer_id: int,
    customer_in: schemas.CustomerUpdate,
) -> Any:
    customer = await _get_customer_or_404(db, customer_id)
    try:
        return await crud.customer.update(db, record=customer, obj_in=customer_in)
    except NotFoundError as e:
        # Deleted between the read and the write
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{customer_id}/reservations", response_model=List[schemas.Reservation])
async def read_customer_reservations(customer_id: int, db: AsyncSession = Depends(deps.get_db)) -> Any:
    customer = await _get_customer_or_404(db, customer_id)
    return await crud.customer.get_reservations(db, record=customer)


@router.post(
    "/{customer_id}/reservations",
    response_model=schemas.Reservation,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer_reservation(
    *,
    db: AsyncSession = Depends(deps.get_db),
    customer_id: int,
    reservation_in: schemas.ReservationCreate,
) -> Any:
    customer = await _get_customer_or_404(db, customer_id)
    return await crud.reservation.create(db, customer_id=customer.id, obj_in=reservation_in)
