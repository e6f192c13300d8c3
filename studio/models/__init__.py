"""Import all models so Base.metadata is complete for create_all and Alembic."""
from .base import TimestampMixin
from .customer import Customer
from .booking import Booking
from .album import Album
from .image import Image
from .inquiry import Inquiry

__all__ = [
    "TimestampMixin",
    "Customer",
    "Booking",
    "Album",
    "Image",
    "Inquiry",
]
