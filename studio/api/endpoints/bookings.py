"""Booking API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from studio.api.deps import get_db
from studio.repositories.booking_repo import BookingRepository
from studio.repositories.customer_repo import CustomerRepository
from studio.schemas.booking import BookingCreate, BookingUpdate, BookingResponse

router = APIRouter()


def booking_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Booking not found')


@router.post('', response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(booking_data: BookingCreate, db: Session = Depends(get_db)):
    """Book a session for an existing customer."""
    if not CustomerRepository(db).exists(booking_data.customer_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Customer not found'
        )
    return BookingRepository(db).create_booking(booking_data)


@router.put('/{booking_id}', response_model=BookingResponse)
def update_booking(booking_id: int, booking_data: BookingUpdate, db: Session = Depends(get_db)):
    booking = BookingRepository(db).update_booking(booking_id, booking_data)
    if not booking:
        raise booking_not_found()
    return booking


@router.delete('/{booking_id}', response_model=dict)
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    if not BookingRepository(db).delete(booking_id):
        raise booking_not_found()
    return {'message': 'Booking deleted successfully'}
