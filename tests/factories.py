"""Builders that insert records directly through the repositories."""

from __future__ import annotations

from datetime import datetime, timedelta

from tradersbloc.domain.entities import Admin, AdminStatus, Invoice, Role, User, Vendor
from tradersbloc.infrastructure.repositories import (
    AdminRepository,
    InvoiceRepository,
    UserRepository,
    VendorRepository,
)
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc

PASSWORD = "StrongPass123"


def make_user(
    db,
    hasher: PasswordHasher,
    *,
    email: str = "customer@example.com",
    password: str = PASSWORD,
    created_at: datetime | None = None,
) -> User:
    return UserRepository(db).create(
        User(
            id=None,
            first_name="Ada",
            last_name="Lovelace",
            phone_number="+15550001",
            email=email,
            password=hasher.hash(password),
            company_name="Analytical Engines",
            tax_id="TX-001",
            industry="Manufacturing",
            created_at=created_at or now_utc(),
        )
    )


def make_admin(
    db,
    hasher: PasswordHasher,
    *,
    email: str = "admin@example.com",
    password: str = PASSWORD,
    role: Role = Role.ADMIN,
    status: AdminStatus = AdminStatus.ACTIVE,
) -> Admin:
    return AdminRepository(db).create(
        Admin(
            id=None,
            name="Grace Hopper",
            email=email,
            password=hasher.hash(password),
            role=role,
            status=status,
            created_at=now_utc(),
        )
    )


def make_vendor(db, *, name: str = "Acme Supplies", created_by: int | None = None) -> Vendor:
    return VendorRepository(db).create(
        Vendor(
            id=None,
            name=name,
            contact_person="Wile E.",
            contact_person_phone_number="+15550002",
            phone_number="+15550003",
            address="1 Desert Road",
            email="sales@acme.example.com",
            bank_name="Canyon Bank",
            bank_account_number="000123",
            created_by=created_by,
            created_at=now_utc(),
        )
    )


def make_invoice(
    db,
    *,
    user_id: int,
    vendor_id: int,
    invoice_number: str = "INV-001",
    total_price: float = 1000.0,
    due_in_days: int = 30,
    submitted_at: datetime | None = None,
) -> Invoice:
    now = submitted_at or now_utc()
    return InvoiceRepository(db).create(
        Invoice(
            id=None,
            user_id=user_id,
            vendor_id=vendor_id,
            invoice_number=invoice_number,
            description="Steel beams",
            quantity=10,
            price_per_unit=total_price / 10,
            total_price=total_price,
            invoice_file=None,
            payment_terms="Net 30",
            due_date=now + timedelta(days=due_in_days),
            submission_date=now,
            created_at=now,
        )
    )


