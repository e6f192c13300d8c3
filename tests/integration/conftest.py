"""
Integration test configuration
"""
import pytest
from fastapi.testclient import TestClient

from studio.app.config import Settings
from studio.app.main import create_application


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL="sqlite://",
        LOCAL_DATA_PATH=str(tmp_path),
        PERSISTENT_VOLUME_PATH=None,
        PUBLIC_BASE_URL="https://studio.example.com",
    )


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    """FastAPI test client; entering it runs startup, which creates the tables."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def image_file():
    def build(name="photo.jpg", content_type="image/jpeg", data=b"\xff\xd8\xff-image"):
        return ("images", (name, data, content_type))
    return build
