"""Album model."""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from studio.db.base import Base
from .base import TimestampMixin


class Album(Base, TimestampMixin):
    """Gallery album; private albums are delivered to a client by token + passphrase."""

    __tablename__ = 'albums'

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)

    # Private delivery
    is_private = Column(Boolean, default=False, nullable=False)
    passphrase = Column(String(255), nullable=True)  # Stored as entered
    access_token = Column(String(32), nullable=True, index=True)  # Not unique-constrained
    customer_id = Column(Integer, ForeignKey('customers.id', ondelete='SET NULL'), nullable=True, index=True)

    # Relationships
    customer = relationship('Customer', back_populates='albums')
    images = relationship(
        'Image',
        back_populates='album',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f'<Album(id={self.id}, name={self.name}, private={self.is_private})>'
