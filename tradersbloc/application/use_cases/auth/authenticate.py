"""Use case for authenticating any principal with an email/password pair."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import AuthSession, Role
from tradersbloc.infrastructure.repositories import AdminRepository, UserRepository
from tradersbloc.infrastructure.security import PasswordHasher


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a principal."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    SUSPENDED = auto()


def authenticate(
    session: Session, hasher: PasswordHasher, email: str, password: str
) -> tuple[AuthSession | None, AuthenticationStatus]:
    """Return the session issued for the credentials along with the outcome.

    End customers are checked first. When no customer matches both the email
    and the password, the staff table is consulted with the same credentials.
    """

    user = UserRepository(session).get_by_email(email)
    if user is not None and hasher.verify(password, user.password):
        auth_session = AuthSession(
            identity_id=user.id, email=user.email, role=Role.ORDINARY_USER
        )
        return auth_session, AuthenticationStatus.SUCCESS

    admin = AdminRepository(session).get_by_email(email)
    if admin is None or not hasher.verify(password, admin.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    auth_session = AuthSession(identity_id=admin.id, email=admin.email, role=admin.role)
    if not admin.is_active:
        return auth_session, AuthenticationStatus.SUSPENDED
    return auth_session, AuthenticationStatus.SUCCESS


__all__ = ["AuthenticationStatus", "authenticate"]
