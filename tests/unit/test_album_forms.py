import pytest
from fastapi.exceptions import RequestValidationError

from studio.api.endpoints.albums import parse_album_form
from studio.schemas.album import AlbumCreate, AlbumUpdate


def test_parse_album_form_returns_schema():
    album_data = parse_album_form(AlbumCreate, name=" Portraits ", category="portrait")

    assert album_data.name == "Portraits"


def test_parse_album_form_reports_field_errors():
    with pytest.raises(RequestValidationError) as exc_info:
        parse_album_form(AlbumCreate, name="Wedding", category="wedding", is_private=True)

    assert "passphrase" in exc_info.value.errors()[0]["msg"]


def test_explicit_none_customer_is_kept_for_update():
    album_data = parse_album_form(AlbumUpdate, customer_id=None)

    assert album_data.model_dump(exclude_unset=True) == {"customer_id": None}
