"""Use case for registering mobile application users."""

from datetime import date

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import AppUser
from tradersbloc.domain.errors import Conflict
from tradersbloc.infrastructure.repositories import AppUserRepository
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc


def register_app_user(
    session: Session,
    hasher: PasswordHasher,
    *,
    first_name: str,
    last_name: str,
    phone_number: str,
    email: str,
    password: str,
    profile_picture: str | None = None,
    date_of_birth: date | None = None,
) -> AppUser:
    """Create an app user; ``profile_picture`` is stored as the given URL."""

    repository = AppUserRepository(session)
    if repository.get_by_email(email):
        raise Conflict("User already exists")

    app_user = AppUser(
        id=None,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        email=email,
        password=hasher.hash(password),
        profile_picture=profile_picture,
        date_of_birth=date_of_birth,
        created_at=now_utc(),
    )
    return repository.create(app_user)


__all__ = ["register_app_user"]
