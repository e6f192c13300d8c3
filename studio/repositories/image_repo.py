"""Image repository extending base repository."""
from sqlalchemy.orm import Session
from sqlalchemy import func, asc
from typing import Optional, List

from studio.repositories.base import BaseRepository
from studio.models.image import Image


class ImageRepository(BaseRepository[Image]):
    """Repository for album image operations."""

    def __init__(self, db: Session):
        super().__init__(Image, db)

    def add_image(
        self,
        album_id: int,
        url: str,
        caption: Optional[str] = None,
        order_index: int = 0
    ) -> Image:
        """
        Attach an image to an album at a caller-chosen position.

        Args:
            album_id: Owning album ID
            url: Public location of the file (e.g. /uploads/images-...jpg)
            caption: Optional caption
            order_index: Display position; not required to be unique

        Returns:
            Created Image instance
        """
        return self.create({
            'album_id': album_id,
            'url': url,
            'caption': caption,
            'order_index': order_index,
        })

    def list_for_album(self, album_id: int) -> List[Image]:
        """Images of an album ordered by order_index, ties by id."""
        return self.db.query(Image).filter(
            Image.album_id == album_id
        ).order_by(asc(Image.order_index), asc(Image.id)).all()

    def next_order_index(self, album_id: int) -> int:
        """
        Position for the next appended image.

        Uses max(order_index) + 1 rather than the image count, so indices
        stay unique after earlier images were deleted.
        """
        current_max = self.db.query(func.max(Image.order_index)).filter(
            Image.album_id == album_id
        ).scalar()
        return 0 if current_max is None else current_max + 1

    def update_feedback(
        self,
        image_id: int,
        feedback: Optional[str],
        is_selected: bool
    ) -> Optional[Image]:
        """
        Record client feedback and selection for an image.

        Args:
            image_id: Image ID
            feedback: Free-text feedback (None clears it)
            is_selected: Whether the client picked this image

        Returns:
            Updated Image or None if not found
        """
        return self.update(image_id, {'feedback': feedback, 'is_selected': bool(is_selected)})
