import pytest
from fastapi.testclient import TestClient

from studio.schemas.album import AlbumCreate


@pytest.mark.integration
def test_schema_bug_inside_handler_is_a_server_error(app):
    @app.get("/api/broken")
    def broken():
        return AlbumCreate(name="", category="")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/broken")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.integration
def test_missing_album_is_not_found(client):
    response = client.get("/api/admin/albums/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Album not found"}
