"""Inquiry repository."""
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from typing import Optional, List

from studio.repositories.base import BaseRepository
from studio.models.inquiry import Inquiry
from studio.schemas.inquiry import InquiryCreate


class InquiryRepository(BaseRepository[Inquiry]):
    """Repository for contact form inquiries."""

    def __init__(self, db: Session):
        super().__init__(Inquiry, db)

    def create_inquiry(self, inquiry_data: InquiryCreate) -> Inquiry:
        """
        Store a new, unread inquiry.

        A missing client timestamp is replaced by the current UTC time.
        """
        inquiry_dict = inquiry_data.model_dump()
        inquiry_dict['phone'] = inquiry_dict.get('phone') or ''
        if not inquiry_dict.get('timestamp'):
            inquiry_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        inquiry_dict['read'] = False
        return self.create(inquiry_dict)

    def list_inquiries(self, unread_only: bool = False) -> List[Inquiry]:
        """Inquiries newest first."""
        filters = {'read': False} if unread_only else None
        inquiries, _ = self.get_multi(filters=filters)
        return inquiries

    def mark_read(self, inquiry_id: int) -> Optional[Inquiry]:
        """
        Mark an inquiry as read. Calling it again is harmless.

        Returns:
            The inquiry, or None if not found
        """
        return self.update(inquiry_id, {'read': True})
