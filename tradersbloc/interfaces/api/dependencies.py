"""FastAPI dependency utilities."""

from collections.abc import Callable

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from tradersbloc.domain.authorization import admit
from tradersbloc.domain.entities import AuthSession, Role
from tradersbloc.domain.errors import NotFound
from tradersbloc.infrastructure.security import PasswordHasher, TokenService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def resolve_auth_session(token: str | None, tokens: TokenService) -> AuthSession | None:
    """Decode ``token``; a missing or invalid token yields no session."""

    if not token:
        return None
    try:
        return tokens.decode(token)
    except ValueError:
        return None


def get_auth_session(
    token: str | None = Depends(oauth2_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthSession | None:
    """Return the session carried by the bearer token, if any."""

    return resolve_auth_session(token, tokens)


def require_session(role: Role | None = None) -> Callable[..., AuthSession]:
    """Build a dependency admitting only sessions that satisfy ``role``."""

    def dependency(
        auth_session: AuthSession | None = Depends(get_auth_session),
    ) -> AuthSession:
        return admit(auth_session, role)

    return dependency


require_user = require_session(Role.ORDINARY_USER)
require_admin = require_session(Role.ADMIN)
require_super_admin = require_session(Role.SUPER_ADMIN)


def require_customer(auth_session: AuthSession = Depends(require_user)) -> AuthSession:
    """Admit the session and ensure it belongs to an end customer account.

    Staff identities live in a separate table, so a super-admin passing the
    gate has no customer record to act on.
    """

    if auth_session.role is not Role.ORDINARY_USER:
        raise NotFound("No customer account is associated with this session")
    return auth_session


__all__ = [
    "get_auth_session",
    "get_password_hasher",
    "get_token_service",
    "oauth2_scheme",
    "require_admin",
    "require_customer",
    "require_session",
    "require_super_admin",
    "require_user",
    "resolve_auth_session",
]
