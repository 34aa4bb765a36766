import uuid

import pytest
from fastapi.testclient import TestClient

from recommendations_api.app.core import db
from recommendations_api.app.core.config import settings
from recommendations_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the schema applied."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "recommendations.db"))
    db.init_db()
    return settings.database_url


@pytest.fixture
def client(database):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_body():
    """Return a factory for recommendation request bodies with unique names."""

    def _make(**overrides):
        token = uuid.uuid4().hex[:10]
        body = {
            "name": f"song-{token}",
            "media_link": f"https://www.youtube.com/watch?v={token}",
        }
        body.update(overrides)
        return body

    return _make
