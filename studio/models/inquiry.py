"""Inquiry model."""
from sqlalchemy import Column, Integer, String, Boolean, Text

from studio.db.base import Base
from .base import TimestampMixin


class Inquiry(Base, TimestampMixin):
    """Contact form submission."""

    __tablename__ = 'inquiries'

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)

    type = Column(String(100), nullable=False)
    service = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(Text, nullable=False)  # As sent by the client

    read = Column(Boolean, default=False, nullable=False, index=True)

    def __repr__(self) -> str:
        return f'<Inquiry(id={self.id}, email={self.email}, read={self.read})>'
