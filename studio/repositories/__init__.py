from .base import BaseRepository
from .album_repo import AlbumRepository
from .image_repo import ImageRepository
from .customer_repo import CustomerRepository
from .booking_repo import BookingRepository
from .inquiry_repo import InquiryRepository

__all__ = [
    "BaseRepository",
    "AlbumRepository",
    "ImageRepository",
    "CustomerRepository",
    "BookingRepository",
    "InquiryRepository",
]
