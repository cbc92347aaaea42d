# app/schemas/reservation.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, PositiveInt


class ReservationBase(BaseModel):
    start_at: datetime
    num_guests: PositiveInt
    notes: Optional[str] = None


class ReservationCreate(ReservationBase):
    pass


class Reservation(ReservationBase):
    id: int
    customer_id: int

    class Config:
        from_attributes = True
