"""Dependencies for API endpoints.

The engine, session factory and upload storage are created once in
`create_application` and kept on `app.state`; handlers receive them
through these dependencies.
"""
from typing import Iterator, Set

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from studio.app.config import Settings
from studio.services.albums import AlbumService
from studio.services.storage.local import LocalStorage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    """Session per request, closed when the response is sent."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_storage(request: Request) -> LocalStorage:
    return request.app.state.storage


def get_album_service(
    db: Session = Depends(get_db),
    storage: LocalStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> AlbumService:
    return AlbumService(
        db,
        storage,
        max_upload_size=settings.MAX_UPLOAD_SIZE_BYTES,
        max_upload_files=settings.MAX_UPLOAD_FILES,
        token_length=settings.ACCESS_TOKEN_LENGTH,
    )


def get_client_ip(request: Request) -> str:
    """Extract client IP address."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0]
    return request.client.host if request.client else "unknown"


async def get_form_fields(request: Request) -> Set[str]:
    """
    Names of the form fields actually sent.

    FastAPI reads an empty form value as the parameter default, so this is
    how a handler tells "sent empty" from "not sent".
    """
    if not request.headers.get("content-type", "").startswith(
        ("multipart/form-data", "application/x-www-form-urlencoded")
    ):
        return set()
    form = await request.form()
    return set(form.keys())
