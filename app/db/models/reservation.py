# app/db/models/reservation.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class Reservation(Base):
    customer_id = Column(ForeignKey("customers.id"), nullable=False, index=True)
    start_at = Column(DateTime(timezone=True), nullable=False)
    num_guests = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)

    customer = relationship("Customer", back_populates="reservations")
