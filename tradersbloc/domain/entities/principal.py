"""Domain entities representing the principals that can hold an account."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .role import AdminStatus, Role


@dataclass
class User:
    """End customer submitting invoices and financing requests."""

    id: int | None
    first_name: str
    last_name: str
    phone_number: str
    email: str
    password: str
    company_name: str
    tax_id: str
    industry: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Admin:
    """Staff member reviewing customer submissions."""

    id: int | None
    name: str
    email: str
    password: str
    role: Role
    status: AdminStatus = AdminStatus.ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, role: Role) -> bool:
        """Return ``True`` when the admin's role is exactly ``role``."""

        return self.role == role

    def is_super_admin(self) -> bool:
        return self.has_role(Role.SUPER_ADMIN)

    @property
    def is_active(self) -> bool:
        return self.status == AdminStatus.ACTIVE


@dataclass
class AppUser:
    """Mobile application user registered outside the financing workflow."""

    id: int | None
    first_name: str
    last_name: str
    phone_number: str
    email: str
    password: str
    profile_picture: str | None = None
    date_of_birth: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class UserSummary:
    """Lightweight view of a customer embedded in other records."""

    id: int
    first_name: str
    last_name: str
    email: str
    company_name: str


__all__ = ["Admin", "AppUser", "User", "UserSummary"]
