from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app import crud, schemas


async def add_customer(db, first_name, last_name, phone="555-0100", notes=None):
    return await crud.customer.persist(
        db,
        record=schemas.Customer(first_name=first_name, last_name=last_name, phone=phone, notes=notes),
    )


async def add_reservations(db, customer, count):
    start = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    for i in range(count):
        await crud.reservation.create(
            db,
            customer_id=customer.id,
            obj_in=schemas.ReservationCreate(start_at=start + timedelta(days=i), num_guests=2),
        )
