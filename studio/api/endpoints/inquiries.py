"""Inquiry API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
import logging

from studio.api.deps import get_db
from studio.repositories.inquiry_repo import InquiryRepository
from studio.schemas.inquiry import InquiryCreate, InquiryResponse, InquiryCreatedResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def inquiry_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Inquiry not found')


@router.get('', response_model=list[InquiryResponse])
def list_inquiries(
    unread_only: bool = Query(False, description='Only unread inquiries'),
    db: Session = Depends(get_db)
):
    """List inquiries, newest first."""
    return InquiryRepository(db).list_inquiries(unread_only=unread_only)


@router.post('', response_model=InquiryCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_inquiry(inquiry_data: InquiryCreate, db: Session = Depends(get_db)):
    """
    Submit the contact form.

    - **name**, **email**, **type**, **service**, **message**: required
    - **phone**: optional
    - **timestamp**: client time; server time is used when missing
    """
    inquiry = InquiryRepository(db).create_inquiry(inquiry_data)
    logger.info(f"New {inquiry.type} inquiry {inquiry.id} for {inquiry.service}")
    return InquiryCreatedResponse(id=inquiry.id, message='Inquiry submitted successfully')


@router.patch('/{inquiry_id}/read', response_model=dict)
def mark_inquiry_read(inquiry_id: int, db: Session = Depends(get_db)):
    """Mark an inquiry as read. Repeating the call is harmless."""
    if not InquiryRepository(db).mark_read(inquiry_id):
        raise inquiry_not_found()
    return {'message': 'Inquiry marked as read'}


@router.delete('/{inquiry_id}', response_model=dict)
def delete_inquiry(inquiry_id: int, db: Session = Depends(get_db)):
    if not InquiryRepository(db).delete(inquiry_id):
        raise inquiry_not_found()
    return {'message': 'Inquiry deleted successfully'}
