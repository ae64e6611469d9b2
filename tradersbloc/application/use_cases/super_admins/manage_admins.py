"""Use cases reserved to super-admins for managing staff accounts."""

from dataclasses import replace

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import log_admin_activity
from tradersbloc.domain.entities import (
    Admin,
    AdminStatus,
    AuthSession,
    NotificationType,
    Role,
)
from tradersbloc.domain.errors import BadRequest, Conflict, NotFound
from tradersbloc.infrastructure.repositories import AdminRepository
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc


def _get_admin(repository: AdminRepository, admin_id: int) -> Admin:
    admin = repository.get(admin_id)
    if admin is None:
        raise NotFound("Admin not found")
    return admin


def create_admin(
    session: Session,
    hasher: PasswordHasher,
    *,
    name: str,
    email: str,
    password: str,
    role: Role = Role.ADMIN,
) -> Admin:
    """Create a staff account; only the ``ADMIN`` role can be granted here."""

    if Role(role) != Role.ADMIN:
        raise BadRequest("New staff accounts can only be created with the ADMIN role")

    repository = AdminRepository(session)
    if repository.get_by_email(email):
        raise Conflict("Email already exists")

    admin = Admin(
        id=None,
        name=name,
        email=email,
        password=hasher.hash(password),
        role=Role.ADMIN,
        status=AdminStatus.ACTIVE,
        created_at=now_utc(),
    )
    return repository.create(admin)


def update_admin(
    session: Session,
    *,
    auth_session: AuthSession,
    admin_id: int,
    status: AdminStatus,
    role: Role | None = None,
) -> Admin:
    """Change an admin's status and, optionally, demote them to ``ADMIN``."""

    if role is not None and Role(role) != Role.ADMIN:
        raise BadRequest("Only the ADMIN role can be assigned here")

    repository = AdminRepository(session)
    current = _get_admin(repository, admin_id)
    updated = repository.update(
        replace(
            current,
            status=AdminStatus(status),
            role=Role(role) if role is not None else current.role,
            updated_at=now_utc(),
        )
    )

    log_admin_activity(
        session,
        admin_id=auth_session.identity_id,
        action=f"Updated admin: {updated.email}",
        kind=NotificationType.SYSTEM_ALERT,
    )
    return updated


def update_admin_permissions(session: Session, *, admin_id: int, role: Role) -> Admin:
    role = Role(role)
    if not role.is_staff:
        raise BadRequest("Role must be ADMIN or SUPER_ADMIN")

    repository = AdminRepository(session)
    current = _get_admin(repository, admin_id)
    return repository.update(replace(current, role=role, updated_at=now_utc()))


def delete_admin(session: Session, *, auth_session: AuthSession, admin_id: int) -> Admin:
    """Permanently remove an admin account."""

    repository = AdminRepository(session)
    admin = _get_admin(repository, admin_id)
    repository.delete(admin_id)

    log_admin_activity(
        session,
        admin_id=auth_session.identity_id,
        action=f"Deleted admin: {admin.email}",
        kind=NotificationType.SYSTEM_ALERT,
    )
    return admin


__all__ = ["create_admin", "delete_admin", "update_admin", "update_admin_permissions"]
