"""Booking repository."""
from sqlalchemy.orm import Session
from typing import Optional, List

from studio.repositories.base import BaseRepository
from studio.models.booking import Booking
from studio.schemas.booking import BookingCreate, BookingUpdate


class BookingRepository(BaseRepository[Booking]):
    """Repository for customer bookings."""

    def __init__(self, db: Session):
        super().__init__(Booking, db)

    def create_booking(self, booking_data: BookingCreate) -> Booking:
        return self.create(booking_data.model_dump())

    def list_for_customer(self, customer_id: int) -> List[Booking]:
        """Bookings of one customer, newest first."""
        bookings, _ = self.get_multi(filters={'customer_id': customer_id})
        return bookings

    def update_booking(self, booking_id: int, booking_data: BookingUpdate) -> Optional[Booking]:
        update_dict = booking_data.model_dump(exclude_unset=True)
        for field in ('details', 'amount'):
            if update_dict.get(field) is None:
                update_dict.pop(field, None)
        return self.update(booking_id, update_dict)
