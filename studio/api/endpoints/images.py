"""Image API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from studio.api.deps import get_db, get_album_service
from studio.repositories.image_repo import ImageRepository
from studio.schemas.image import ImageResponse, ImageFeedbackUpdate, ImageDeleteResponse
from studio.services.albums import AlbumService

router = APIRouter()


@router.post('/{image_id}/feedback', response_model=ImageResponse)
def update_image_feedback(
    image_id: int,
    payload: ImageFeedbackUpdate,
    db: Session = Depends(get_db)
):
    """
    Record a client's feedback and selection for one image.

    Anyone holding the image id can call this; it is not tied to the
    album's passphrase.
    """
    image = ImageRepository(db).update_feedback(image_id, payload.feedback, payload.is_selected)
    if not image:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Image not found'
        )
    return image


@router.delete('/{image_id}', response_model=ImageDeleteResponse)
def delete_image(image_id: int, service: AlbumService = Depends(get_album_service)):
    """Remove one image from its album and delete its file."""
    file_removed = service.delete_image(image_id)
    if file_removed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Image not found'
        )
    return ImageDeleteResponse(message='Image deleted successfully', file_removed=file_removed)
