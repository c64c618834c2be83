"""
Pytest fixtures for MindCompanion tests.
"""

import pytest

from mindcompanion import create_app
from mindcompanion.store import DocumentStore


@pytest.fixture
def app(tmp_path):
    """Create an app backed by a throwaway data directory."""
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATA_DIR": str(tmp_path / "data"),
        "RATELIMIT_ENABLED": False,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(tmp_path):
    return DocumentStore(str(tmp_path / "store"))


@pytest.fixture
def auth_client(client):
    """A test client with a signed-up, logged-in user."""
    response = client.post("/api/auth/signup", json={
        "email": "alex@example.com",
        "password": "secret123",
        "name": "Alex",
    })
    assert response.status_code == 201
    return client
