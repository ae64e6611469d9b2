"""Shared fixtures for the TradersBloc test-suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

from fastapi.testclient import TestClient  # noqa: E402

from tradersbloc.config import Settings  # noqa: E402
from tradersbloc.domain.entities import AuthSession, Role  # noqa: E402
from tradersbloc.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    initialize_database,
)
from tradersbloc.infrastructure.security import PasswordHasher  # noqa: E402


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        access_token_expire_minutes=30,
        password_hash_rounds=1000,
    )


@pytest.fixture()
def hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.password_hash_rounds)


@pytest.fixture()
def session(settings: Settings):
    """Yield a session bound to a fresh in-memory database."""

    engine = build_engine(settings)
    initialize_database(engine)
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture()
def app(settings: Settings):
    from main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def app_session(client, app):
    """Session sharing the in-memory database used by ``client``."""

    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def auth_headers(app):
    """Return a builder of ``Authorization`` headers for arbitrary sessions."""

    def build(identity_id: int, role: Role, email: str = "someone@example.com") -> dict:
        token = app.state.token_service.create_access_token(
            AuthSession(identity_id=identity_id, email=email, role=role)
        )
        return {"Authorization": f"Bearer {token}"}

    return build
