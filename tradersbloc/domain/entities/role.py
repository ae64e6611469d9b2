"""Access tiers and account states for principals."""

from enum import Enum


class Role(str, Enum):
    """Role tag carried by every session.

    End customers are always ``ORDINARY_USER``; staff principals are either
    ``ADMIN`` or ``SUPER_ADMIN``.
    """

    ORDINARY_USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"

    @property
    def is_staff(self) -> bool:
        return self in (Role.ADMIN, Role.SUPER_ADMIN)


class AdminStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


STAFF_ROLES = (Role.ADMIN, Role.SUPER_ADMIN)


__all__ = ["AdminStatus", "Role", "STAFF_ROLES"]
