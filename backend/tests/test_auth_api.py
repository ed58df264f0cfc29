import uuid
from datetime import datetime, timedelta, timezone

from app.core.security import hash_password, verify_password
from app.db import SessionLocal
from app.models.user import AuthToken
from conftest import register


def test_password_hash_roundtrip():
    stored = hash_password("secret123", iterations=1000)
    assert stored.startswith("pbkdf2_sha256$1000$")
    assert verify_password("secret123", stored)
    assert not verify_password("wrong", stored)
    assert not verify_password("secret123", "garbage")


def test_register_login_me_logout(client):
    email = f"amy-{uuid.uuid4().hex[:8]}@example.com"
    reg = register(client, email=email, full_name="Amy")
    assert reg["user"]["email"] == email
    assert reg["user"]["full_name"] == "Amy"

    lr = client.post("/auth/login", json={"email": email.upper(), "password": "secret123"})
    assert lr.status_code == 200, lr.text
    headers = {"Authorization": f"Bearer {lr.json()['token']}"}

    me = client.get("/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == reg["user"]["id"]

    out = client.post("/auth/logout", headers=headers)
    assert out.status_code == 204
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_duplicate_email_conflicts(client):
    email = f"dup-{uuid.uuid4().hex[:8]}@example.com"
    register(client, email=email)
    r = client.post("/auth/register", json={"email": email, "password": "another1"})
    assert r.status_code == 409


def test_bad_credentials(client):
    email = f"bob-{uuid.uuid4().hex[:8]}@example.com"
    register(client, email=email)
    r = client.post("/auth/login", json={"email": email, "password": "nope-nope"})
    assert r.status_code == 401


def test_short_password_rejected(client):
    r = client.post("/auth/register", json={"email": "short@example.com", "password": "abc"})
    assert r.status_code == 422


def test_missing_or_bad_token(client):
    assert client.get("/goals/").status_code == 401
    assert client.get("/goals/", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/goals/", headers={"Authorization": "Bearer not-a-token"}).status_code == 401


def test_expired_token_rejected_and_removed(client):
    token = register(client)["token"]
    db = SessionLocal()
    try:
        row = db.query(AuthToken).filter(AuthToken.token == token).first()
        row.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
        db.commit()
    finally:
        db.close()

    r = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

    db = SessionLocal()
    try:
        assert db.query(AuthToken).filter(AuthToken.token == token).count() == 0
    finally:
        db.close()
