"""
Request/response schemas.

Albums and their images, private-album unlocking, customers, bookings
and contact inquiries.
"""

from .image import ImageResponse, ImageFeedbackUpdate, ImageDeleteResponse
from .album import (
    AlbumCreate,
    AlbumUpdate,
    AlbumResponse,
    AlbumAdminResponse,
    AlbumPassphraseVerify,
    AlbumShareResponse,
    AlbumDeleteResponse,
)
from .customer import CustomerCreate, CustomerUpdate, CustomerResponse
from .booking import BookingCreate, BookingUpdate, BookingResponse
from .inquiry import InquiryCreate, InquiryResponse, InquiryCreatedResponse

__all__ = [
    "ImageResponse",
    "ImageFeedbackUpdate",
    "ImageDeleteResponse",
    "AlbumCreate",
    "AlbumUpdate",
    "AlbumResponse",
    "AlbumAdminResponse",
    "AlbumPassphraseVerify",
    "AlbumShareResponse",
    "AlbumDeleteResponse",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "BookingCreate",
    "BookingUpdate",
    "BookingResponse",
    "InquiryCreate",
    "InquiryResponse",
    "InquiryCreatedResponse",
]
