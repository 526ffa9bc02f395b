"""Tests for bearer-token authentication on the HTTP surface."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from summit.api.dependencies.auth import get_current_user_id
from summit.config.settings import settings
from summit.main import app

pytestmark = pytest.mark.api

SECRET = "test-secret-key"


@pytest.fixture
def real_auth(client, monkeypatch):
    """Use real token verification instead of the fixed test user."""
    monkeypatch.setattr(settings, "auth_secret_key", SECRET)
    app.dependency_overrides.pop(get_current_user_id, None)
    return client


def bearer(sub: str, secret: str = SECRET) -> dict:
    token = jwt.encode(
        {"sub": sub, "aud": "authenticated", "exp": datetime.now(UTC) + timedelta(hours=1)},
        secret,
        algorithm="HS256",
    )
    return {"Authorization": f"Bearer {token}"}


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize("path", ["/today", "/week", "/plans", "/plans/current", "/workouts", "/metrics", "/profiles"])
def test_missing_token_is_rejected(real_auth, path):
    response = real_auth.get(path)

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_invalid_token_is_rejected(real_auth):
    response = real_auth.get("/today", headers=bearer("user-test-1", secret="wrong"))

    assert response.status_code == 401


def test_valid_token_scopes_to_subject(real_auth, today, make_workout):
    make_workout(today, "strength", user_id="user-from-token")

    body = real_auth.get("/today", headers=bearer("user-from-token")).json()

    assert body["workout"] is not None
    assert body["workout"]["workout_type"] == "strength"


def test_request_id_is_echoed(client):
    assert client.get("/health", headers={"X-Request-ID": "abc123"}).headers["X-Request-ID"] == "abc123"
    assert client.get("/health").headers["X-Request-ID"]
