"""Coarse path-prefix access control applied before routing."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from tradersbloc.domain.authorization import satisfies
from tradersbloc.domain.entities import AuthSession, Role

from .dependencies import resolve_auth_session


class RouteClass(str, Enum):
    PUBLIC = "public"
    ADMIN = "admin"
    SUPER_ADMIN = "super-admin"
    OTHER = "other"


PUBLIC_PREFIXES = (
    "/auth",
    "/sign-in",
    "/sign-up",
    "/public",
    "/health",
    "/unauthorized",
    "/docs",
    "/openapi.json",
    "/redoc",
)
ADMIN_PREFIX = "/admin"
SUPER_ADMIN_PREFIX = "/super-admin"

_REQUIRED_ROLE = {
    RouteClass.ADMIN: Role.ADMIN,
    RouteClass.SUPER_ADMIN: Role.SUPER_ADMIN,
}


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def classify_path(path: str) -> RouteClass:
    if any(_matches(path, prefix) for prefix in PUBLIC_PREFIXES):
        return RouteClass.PUBLIC
    if _matches(path, SUPER_ADMIN_PREFIX):
        return RouteClass.SUPER_ADMIN
    if _matches(path, ADMIN_PREFIX):
        return RouteClass.ADMIN
    return RouteClass.OTHER


def is_allowed(route_class: RouteClass, auth_session: AuthSession | None) -> bool:
    """Return ``True`` when the request may continue to its handler.

    Paths outside the staff prefixes always pass; their handlers apply the
    per-operation check.
    """

    required_role = _REQUIRED_ROLE.get(route_class)
    if required_role is None:
        return True
    return auth_session is not None and satisfies(auth_session.role, required_role)


def _bearer_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


class RouteAccessMiddleware(BaseHTTPMiddleware):
    """Redirect callers whose role does not fit the path prefix."""

    def __init__(self, app, unauthorized_path: str = "/unauthorized") -> None:
        super().__init__(app)
        self.unauthorized_path = unauthorized_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        route_class = classify_path(request.url.path)
        if route_class in _REQUIRED_ROLE:
            auth_session = resolve_auth_session(
                _bearer_token(request), request.app.state.token_service
            )
            if not is_allowed(route_class, auth_session):
                return RedirectResponse(self.unauthorized_path, status_code=307)
        return await call_next(request)


__all__ = ["RouteAccessMiddleware", "RouteClass", "classify_path", "is_allowed"]
