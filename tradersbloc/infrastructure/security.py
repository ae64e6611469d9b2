"""Security helpers for hashing and token generation."""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from tradersbloc.config import Settings
from tradersbloc.domain.entities import AuthSession, Role

ALGORITHM = "HS256"


class PasswordHasher:
    """Hash and verify passwords with a single passlib context."""

    def __init__(self, rounds: int = 310_000) -> None:
        # Ajusta "rounds" según tu presupuesto de CPU.
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return self._context.verify(plain_password, hashed_password)

    def needs_rehash(self, hashed_password: str) -> bool:
        return self._context.needs_update(hashed_password)


class TokenService:
    """Issue and decode the bearer tokens that carry an :class:`AuthSession`."""

    def __init__(self, secret_key: str, expire_minutes: int) -> None:
        self._secret_key = secret_key
        self._expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.secret_key, settings.access_token_expire_minutes)

    def create_access_token(
        self, session: AuthSession, expires_delta: timedelta | None = None
    ) -> str:
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=self._expire_minutes)
        )
        claims = {
            "sub": str(session.identity_id),
            "email": session.email,
            "role": session.role.value,
            "exp": expire,
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def decode(self, token: str) -> AuthSession:
        """Return the session encoded in ``token``.

        Raises ``ValueError`` when the token is expired, tampered with or
        missing a claim.
        """

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError as exc:
            raise ValueError("Could not validate credentials") from exc
        try:
            return AuthSession(
                identity_id=int(payload["sub"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError("Could not validate credentials") from exc


def generate_secure_password() -> str:
    """Generate a random password between 12 and 16 characters."""

    alphabet = string.ascii_letters + string.digits + string.punctuation
    length = secrets.choice(range(12, 17))

    while True:
        password = "".join(secrets.choice(alphabet) for _ in range(length))
        if (
            any(char.islower() for char in password)
            and any(char.isupper() for char in password)
            and any(char.isdigit() for char in password)
            and any(char in string.punctuation for char in password)
        ):
            return password


__all__ = ["ALGORITHM", "PasswordHasher", "TokenService", "generate_secure_password"]
