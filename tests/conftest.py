import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides):
        values = {
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test.sqlite'}",
            "UPLOAD_DIR": str(tmp_path / "uploads"),
            "BACKEND_URL": None,
            "FRONTEND_URL": "http://shop.test",
            "UPLOAD_NAMING": "timestamp",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def db(client):
    session = client.app.state.SessionLocal()
    try:
        yield session
    finally:
        session.close()
