"""Typed errors raised by the domain and application layers."""

from __future__ import annotations


class AppError(Exception):
    """Base error carrying a machine-readable ``kind`` and a readable message."""

    kind = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(AppError):
    """Raised when no session accompanies a call that requires one."""

    kind = "UNAUTHORIZED"
    default_message = "You must be logged in to perform this action"


class Forbidden(AppError):
    """Raised when the session role does not satisfy the required role."""

    kind = "FORBIDDEN"
    default_message = "You do not have permission to perform this action"


class NotFound(AppError):
    kind = "NOT_FOUND"
    default_message = "Record not found"


class Conflict(AppError):
    """Raised on uniqueness violations such as a duplicated email."""

    kind = "CONFLICT"
    default_message = "Record already exists"


class BadRequest(AppError):
    kind = "BAD_REQUEST"
    default_message = "Invalid request"


class Internal(AppError):
    """Raised when persistence or an external collaborator fails unexpectedly."""


__all__ = [
    "AppError",
    "BadRequest",
    "Conflict",
    "Forbidden",
    "Internal",
    "NotFound",
    "Unauthenticated",
]
