import os
import uuid

import pytest

# Use in-memory sqlite for tests; must be set before app.* is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["PASSWORD_ITERATIONS"] = "1000"


def get_client():
    # Import after env is set so engine is created with sqlite
    from app.main import app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433
    return TestClient(app)


def register(client, email=None, password="secret123", full_name="Test User"):
    email = email or f"user-{uuid.uuid4().hex[:10]}@example.com"
    r = client.post(
        "/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )
    assert r.status_code == 200, r.text
    return r.json()


@pytest.fixture
def client():
    return get_client()


@pytest.fixture
def auth_headers(client):
    token = register(client)["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(client):
    token = register(client)["token"]
    return {"Authorization": f"Bearer {token}"}
