"""
Shared fixtures: an app bound to a fresh in-memory SQLite database.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite+aiosqlite://",
        bcrypt_rounds=4,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client) -> dict:
    payload = {"name": "A", "email": "a@x.com", "phone": "1", "password": "pw12345"}
    resp = client.post("/api/auth/register", json=payload)
    assert resp.status_code == 201
    return {**payload, "id": resp.json()["user"]["id"]}
