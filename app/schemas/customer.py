# app/schemas/customer.py
from typing import Optional

from pydantic import BaseModel, Field, PositiveInt, computed_field, field_validator


class CustomerBase(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    notes: Optional[str] = None


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def names_not_null(cls, v: Optional[str]) -> str:
        # Omitted means unchanged, defaults are not validated
        if v is None:
            raise ValueError("name cannot be null")
        return v


class Customer(CustomerBase):
    """
    A customer of the restaurant.

    ``id`` stays ``None`` until the record is first persisted; the store
    assigns it on insert and it never changes afterwards.
    """

    id: Optional[PositiveInt] = None

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def assign_id(self, new_id: int) -> None:
        if self.id is not None:
            raise ValueError(f"Customer already has id {self.id}")
        self.id = new_id

    class Config:
        from_attributes = True
