"""
Unit test configuration
"""
import pytest

from studio.db.base import build_engine, build_session_factory, init_db
from studio.services.storage.local import LocalStorage


@pytest.fixture
def db_session():
    """In-memory database with foreign keys enforced."""
    engine = build_engine("sqlite://")
    init_db(engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "uploads"))
