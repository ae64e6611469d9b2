"""Tests for password hashing and bearer tokens."""

import string
from datetime import timedelta

import pytest

from tradersbloc.domain.entities import AuthSession, Role
from tradersbloc.infrastructure.security import (
    PasswordHasher,
    TokenService,
    generate_secure_password,
)


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService("unit-test-secret", expire_minutes=5)


def test_password_hash_round_trip():
    hasher = PasswordHasher(rounds=1000)
    hashed = hasher.hash("Secret123")

    assert hashed != "Secret123"
    assert hasher.verify("Secret123", hashed)
    assert not hasher.verify("secret123", hashed)


def test_token_carries_the_session(tokens):
    session = AuthSession(identity_id=42, email="grace@example.com", role=Role.SUPER_ADMIN)

    assert tokens.decode(tokens.create_access_token(session)) == session


def test_expired_token_is_rejected(tokens):
    session = AuthSession(identity_id=1, email="a@example.com", role=Role.ADMIN)
    token = tokens.create_access_token(session, expires_delta=timedelta(minutes=-1))

    with pytest.raises(ValueError):
        tokens.decode(token)


def test_token_signed_with_another_key_is_rejected(tokens):
    session = AuthSession(identity_id=1, email="a@example.com", role=Role.ADMIN)
    forged = TokenService("another-secret", expire_minutes=5).create_access_token(session)

    with pytest.raises(ValueError):
        tokens.decode(forged)


def test_generated_passwords_mix_character_classes():
    password = generate_secure_password()

    assert 12 <= len(password) <= 16
    assert any(char.islower() for char in password)
    assert any(char.isupper() for char in password)
    assert any(char.isdigit() for char in password)
    assert any(char in string.punctuation for char in password)
