from fastapi import APIRouter
from studio.api.endpoints import albums, images, customers, bookings, inquiries


api_router = APIRouter()

api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(albums.admin_router, prefix="/admin/albums", tags=["admin"])
api_router.include_router(images.router, prefix="/images", tags=["images"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
