"""Customer model."""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from studio.db.base import Base
from .base import TimestampMixin


class Customer(Base, TimestampMixin):
    """Studio client."""

    __tablename__ = 'customers'

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    notes = Column(Text, default='', nullable=False)

    albums = relationship('Album', back_populates='customer', passive_deletes=True)
    bookings = relationship(
        'Booking',
        back_populates='customer',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f'<Customer(id={self.id}, name={self.name})>'
