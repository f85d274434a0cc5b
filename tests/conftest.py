"""Shared fixtures: every test gets its own in-memory SQLite database."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# ``main`` builds a module level application on import.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient  # noqa: E402
from passlib.context import CryptContext  # noqa: E402

from tasktrail.config import Settings, reset_settings_cache  # noqa: E402
from tasktrail.domain.entities import User  # noqa: E402
from tasktrail.infrastructure import security  # noqa: E402
from tasktrail.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    initialize_database,
)

reset_settings_cache()

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the production algorithm but with few rounds so tests stay quick."""

    monkeypatch.setattr(
        security,
        "pwd_context",
        CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__rounds=1_000),
    )


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        access_token_expire_minutes=30,
        log_level="WARNING",
    )


@pytest.fixture()
def session_factory(settings: Settings):
    engine = build_engine(settings.database_url)
    initialize_database(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Return a helper registering users through the real use case."""

    from tasktrail.application.use_cases.users import register_user

    def _make_user(email: str = "owner@example.com") -> User:
        return register_user(session, email=email, password=DEFAULT_PASSWORD)

    return _make_user


@pytest.fixture()
def app(settings: Settings):
    from main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def register(client):
    """Return a helper that registers an account and yields auth headers."""

    def _register(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post(
            "/api/auth/register", json={"email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
