"""Booking model."""
from sqlalchemy import Column, Integer, Date, ForeignKey, Numeric, Text
from sqlalchemy.orm import relationship

from studio.db.base import Base
from .base import TimestampMixin


class Booking(Base, TimestampMixin):
    """Paid session booked by a customer."""

    __tablename__ = 'bookings'

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    customer_id = Column(Integer, ForeignKey('customers.id', ondelete='CASCADE'), nullable=False, index=True)

    details = Column(Text, default='', nullable=False)
    amount = Column(Numeric(10, 2, asdecimal=False), default=0, nullable=False)
    booking_date = Column(Date, nullable=True)

    customer = relationship('Customer', back_populates='bookings')

    def __repr__(self) -> str:
        return f'<Booking(id={self.id}, customer_id={self.customer_id}, date={self.booking_date})>'
