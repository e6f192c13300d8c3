"""Album API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session
from typing import List, Optional, Set, Type, TypeVar
import qrcode
from io import BytesIO
import base64
import logging

from studio.api.deps import get_db, get_album_service, get_app_settings, get_client_ip, get_form_fields
from studio.app.config import Settings
from studio.models.album import Album
from studio.models.image import Image
from studio.repositories.album_repo import AlbumRepository
from studio.schemas.album import (
    AlbumCreate,
    AlbumUpdate,
    AlbumResponse,
    AlbumAdminResponse,
    AlbumPassphraseVerify,
    AlbumShareResponse,
    AlbumDeleteResponse,
)
from studio.schemas.image import ImageResponse
from studio.services.albums import AlbumService

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()

FormSchema = TypeVar("FormSchema", bound=BaseModel)


def build_album_response(
    album: Album,
    images: List[Image],
    locked: bool = False,
    admin: bool = False
):
    """Build a public or admin album response; locked albums carry no images."""
    schema = AlbumAdminResponse if admin else AlbumResponse
    fields = {
        name: getattr(album, name)
        for name in schema.model_fields
        if name not in ('images', 'locked')
    }
    return schema(
        **fields,
        locked=locked,
        images=[] if locked else [ImageResponse.model_validate(image) for image in images],
    )


def parse_album_form(schema: Type[FormSchema], **fields) -> FormSchema:
    """Validate album form fields; errors are reported like any request field error."""
    try:
        return schema(**fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


def build_share_url(settings: Settings, token: str) -> str:
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/private/{token}"


def album_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Album not found')


@router.get('', response_model=list[AlbumResponse])
def list_albums(db: Session = Depends(get_db)):
    """
    List public albums, newest first, each with its images in display order.

    Private albums are only listed through the admin endpoints.
    """
    repo = AlbumRepository(db)
    return [
        build_album_response(album, images)
        for album, images in repo.list_with_images(include_private=False)
    ]


@router.get('/token/{token}', response_model=AlbumResponse)
def get_album_by_token(token: str, db: Session = Depends(get_db)):
    """
    Look up a private album from its delivery link.

    Images are withheld until the passphrase is verified.
    """
    album = AlbumRepository(db).get_by_token(token)
    if not album:
        raise album_not_found()
    return build_album_response(album, [], locked=album.is_private)


@router.post('/token/{token}', response_model=AlbumResponse)
def unlock_album_by_token(
    token: str,
    payload: AlbumPassphraseVerify,
    request: Request,
    service: AlbumService = Depends(get_album_service)
):
    """
    Verify the passphrase of a private album reached by token.

    Returns the album with its images on success, 401 otherwise.
    """
    logger.debug(f"Unlock attempt for token {token} from {get_client_ip(request)}")
    result = service.unlock_by_token(token, payload.passphrase)
    if not result:
        raise album_not_found()
    album, images = result
    return build_album_response(album, images)


@router.get('/{album_id}', response_model=AlbumResponse)
def get_album(album_id: int, db: Session = Depends(get_db)):
    """
    Get one album with its images.

    A private album is returned locked (no images); unlock it through
    `POST /albums/{album_id}/verify`.
    """
    result = AlbumRepository(db).get_with_images(album_id)
    if not result:
        raise album_not_found()
    album, images = result
    return build_album_response(album, images, locked=album.is_private)


@router.post('', response_model=AlbumAdminResponse, status_code=status.HTTP_201_CREATED)
def create_album(
    name: str = Form(''),
    category: str = Form(''),
    is_private: bool = Form(False),
    passphrase: Optional[str] = Form(None),
    customer_id: Optional[int] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    service: AlbumService = Depends(get_album_service)
):
    """
    Create an album and attach the uploaded files as its images.

    - **name**, **category**: required
    - **is_private**: deliver by token + passphrase
    - **passphrase**: required when is_private is true
    - **customer_id**: owning customer (optional)
    - **images**: image files, kept in upload order
    """
    album_data = parse_album_form(
        AlbumCreate,
        name=name,
        category=category,
        is_private=is_private,
        passphrase=passphrase,
        customer_id=customer_id,
    )
    album, album_images = service.create_album(album_data, images or [])
    return build_album_response(album, album_images, admin=True)


@router.put('/{album_id}', response_model=AlbumAdminResponse)
def update_album(
    album_id: int,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    is_private: Optional[bool] = Form(None),
    passphrase: Optional[str] = Form(None),
    customer_id: Optional[int] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    sent_fields: Set[str] = Depends(get_form_fields),
    service: AlbumService = Depends(get_album_service)
):
    """
    Update album fields; uploaded files are appended after the last image.

    Sending `customer_id` empty removes the customer link.
    """
    provided = {
        'name': name,
        'category': category,
        'is_private': is_private,
        'passphrase': passphrase,
        'customer_id': customer_id,
    }
    fields = {key: value for key, value in provided.items() if value is not None}
    if customer_id is None and 'customer_id' in sent_fields:
        fields['customer_id'] = None
    album_data = parse_album_form(AlbumUpdate, **fields)

    result = service.update_album(album_id, album_data, images or [])
    if not result:
        raise album_not_found()
    album, album_images = result
    return build_album_response(album, album_images, admin=True)


@router.delete('/{album_id}', response_model=AlbumDeleteResponse)
def delete_album(album_id: int, service: AlbumService = Depends(get_album_service)):
    """
    Delete an album, its images and their files.

    Files that could not be removed are listed in `failed_files`; the
    album is deleted regardless.
    """
    deletion = service.delete_album(album_id)
    if not deletion:
        raise album_not_found()
    return AlbumDeleteResponse(
        message='Album deleted successfully',
        album_id=deletion.album_id,
        deleted_images=deletion.deleted_images,
        failed_files=deletion.failed_files,
    )


@router.post('/{album_id}/verify', response_model=AlbumResponse)
def verify_album_passphrase(
    album_id: int,
    payload: AlbumPassphraseVerify,
    request: Request,
    service: AlbumService = Depends(get_album_service)
):
    """
    Verify the passphrase of a private album.

    Public endpoint. Returns the album with its images if the passphrase
    matches, 401 otherwise.
    """
    logger.debug(f"Unlock attempt for album {album_id} from {get_client_ip(request)}")
    result = service.unlock_by_id(album_id, payload.passphrase)
    if not result:
        raise album_not_found()
    album, images = result
    return build_album_response(album, images)


@router.get('/{album_id}/share', response_model=AlbumShareResponse)
def get_share_link(
    album_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """
    Share link and QR code for a private album.

    Returns the delivery URL and a base64-encoded PNG QR code of it.
    """
    album = AlbumRepository(db).get(album_id)
    if not album:
        raise album_not_found()

    if not album.is_private or not album.access_token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Only private albums have a share link'
        )

    share_url = build_share_url(settings, album.access_token)

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4
    )
    qr.add_data(share_url)
    qr.make(fit=True)

    img = qr.make_image(fill_color='black', back_color='white')
    buffer = BytesIO()
    img.save(buffer, format='PNG')
    qr_base64 = base64.b64encode(buffer.getvalue()).decode()

    return AlbumShareResponse(
        album_id=album.id,
        access_token=album.access_token,
        share_url=share_url,
        qr_code_url=f'data:image/png;base64,{qr_base64}'
    )


@router.post('/{album_id}/regenerate-token', response_model=dict)
def regenerate_access_token(
    album_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """
    Issue a new access token (invalidates old delivery links).
    """
    repo = AlbumRepository(db, token_length=settings.ACCESS_TOKEN_LENGTH)
    album = repo.get(album_id)
    if not album:
        raise album_not_found()

    new_token = repo.regenerate_access_token(album_id)
    if not new_token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Only private albums have an access token'
        )

    return {
        'access_token': new_token,
        'share_url': build_share_url(settings, new_token)
    }


@admin_router.get('', response_model=list[AlbumAdminResponse])
def admin_list_albums(db: Session = Depends(get_db)):
    """List every album, private ones included, with delivery credentials."""
    repo = AlbumRepository(db)
    return [
        build_album_response(album, images, admin=True)
        for album, images in repo.list_with_images(include_private=True)
    ]


@admin_router.get('/{album_id}', response_model=AlbumAdminResponse)
def admin_get_album(album_id: int, db: Session = Depends(get_db)):
    """Get one album with all images and delivery credentials."""
    result = AlbumRepository(db).get_with_images(album_id)
    if not result:
        raise album_not_found()
    album, images = result
    return build_album_response(album, images, admin=True)
