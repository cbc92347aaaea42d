# app/db/models/customer.py
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class Customer(Base):
    first_name = Column(String, nullable=False, index=True)
    last_name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    # Relationships
    reservations = relationship("Reservation", back_populates="customer", cascade="all, delete-orphan")
