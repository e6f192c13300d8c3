"""Image model."""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship

from studio.db.base import Base
from .base import TimestampMixin


class Image(Base, TimestampMixin):
    """Image (or video) belonging to an album, displayed by order_index."""

    __tablename__ = 'images'

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    album_id = Column(Integer, ForeignKey('albums.id', ondelete='CASCADE'), nullable=False, index=True)

    url = Column(String(512), nullable=False)
    caption = Column(Text, nullable=True)
    order_index = Column(Integer, default=0, nullable=False)

    # Client review of private albums
    feedback = Column(Text, nullable=True)
    is_selected = Column(Boolean, default=False, nullable=False)

    album = relationship('Album', back_populates='images')

    def __repr__(self) -> str:
        return f'<Image(id={self.id}, album_id={self.album_id}, order_index={self.order_index})>'
