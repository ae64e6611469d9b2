"""Use case for registering end customers."""

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import NotificationType, User
from tradersbloc.domain.errors import Conflict
from tradersbloc.infrastructure.repositories import UserRepository
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc


def register_user(
    session: Session,
    hasher: PasswordHasher,
    *,
    first_name: str,
    last_name: str,
    phone_number: str,
    email: str,
    password: str,
    company_name: str,
    tax_id: str,
    industry: str,
) -> User:
    """Create a new end customer ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise Conflict("User already exists")

    user = User(
        id=None,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        email=email,
        password=hasher.hash(password),
        company_name=company_name,
        tax_id=tax_id,
        industry=industry,
        created_at=now_utc(),
    )
    created = repository.create(user)

    create_notification(
        session,
        message=f"New user {created.full_name} has registered",
        kind=NotificationType.SYSTEM_ALERT,
        link=f"/user/{created.id}",
    )
    return created


__all__ = ["register_user"]
