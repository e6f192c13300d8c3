"""Booking schemas."""
from pydantic import BaseModel, Field, ConfigDict
from datetime import date, datetime
from typing import Optional


class BookingCreate(BaseModel):
    customer_id: int
    details: str = ''
    amount: float = Field(0, ge=0, description="Agreed price")
    booking_date: Optional[date] = None


class BookingUpdate(BaseModel):
    details: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    booking_date: Optional[date] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    details: str
    amount: float
    booking_date: Optional[date] = None
    created_at: datetime
