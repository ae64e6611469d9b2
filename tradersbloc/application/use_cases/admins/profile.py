"""Use cases for the signed-in admin's own account."""

from dataclasses import dataclass, field, replace

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Admin, Notification
from tradersbloc.domain.errors import BadRequest, Conflict, NotFound
from tradersbloc.infrastructure.repositories import (
    AdminRepository,
    NotificationRepository,
)
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc


@dataclass
class AdminData:
    admin: Admin
    notifications: list[Notification] = field(default_factory=list)


def get_admin_profile(session: Session, *, admin_id: int) -> Admin:
    admin = AdminRepository(session).get(admin_id)
    if admin is None:
        raise NotFound("Admin not found")
    return admin


def get_admin_data(session: Session, *, admin_id: int) -> AdminData:
    """Return the admin together with the notifications addressed to them."""

    admin = get_admin_profile(session, admin_id=admin_id)
    notifications = NotificationRepository(session).list_for_admin(admin_id)
    return AdminData(admin=admin, notifications=notifications)


def update_admin_data(
    session: Session,
    hasher: PasswordHasher,
    *,
    admin_id: int,
    name: str | None = None,
    email: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> Admin:
    """Update the admin's own name, email or password.

    Changing the password requires both ``current_password`` and
    ``new_password``.
    """

    repository = AdminRepository(session)
    current = get_admin_profile(session, admin_id=admin_id)

    new_email = current.email
    if email is not None and email.lower() != current.email.lower():
        existing = repository.get_by_email(email)
        if existing and existing.id != admin_id:
            raise Conflict("Email already exists")
        new_email = email

    password = current.password
    if current_password or new_password:
        if not (current_password and new_password):
            raise BadRequest("Both current and new passwords are required")
        if not hasher.verify(current_password, current.password):
            raise BadRequest("Current password is incorrect")
        password = hasher.hash(new_password)

    updated = replace(
        current,
        name=name if name is not None else current.name,
        email=new_email,
        password=password,
        updated_at=now_utc(),
    )
    return repository.update(updated)


__all__ = ["AdminData", "get_admin_data", "get_admin_profile", "update_admin_data"]
