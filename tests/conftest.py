import os
import tempfile
from pathlib import Path

# Keep the default database out of the working tree during tests
os.environ.setdefault("AUTHORING_DB_DIR", tempfile.mkdtemp(prefix="authoring_test_db_"))

import pytest
from fastapi.testclient import TestClient

from authoring.app import app
from authoring.database import build_engine, build_session_factory, get_db, init_db
from authoring.services import wizard_service


@pytest.fixture
def session_factory(tmp_path: Path):
    engine = build_engine(f"sqlite:///{tmp_path / 'items.db'}")
    init_db(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    wizard_service.clear_sessions()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        wizard_service.clear_sessions()
