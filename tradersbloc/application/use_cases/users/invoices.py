"""Use cases for the invoices a customer submits for financing."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import ApprovalStatus, Invoice, NotificationType
from tradersbloc.domain.errors import Forbidden, NotFound
from tradersbloc.infrastructure.repositories import InvoiceRepository, VendorRepository
from tradersbloc.utils import ensure_naive_utc, now_utc


def get_owned_invoice(repository: InvoiceRepository, *, invoice_id: int, user_id: int) -> Invoice:
    """Return the invoice when it exists and belongs to ``user_id``."""

    invoice = repository.get(invoice_id)
    if invoice is None:
        raise NotFound("Invoice not found")
    if invoice.user_id != user_id:
        raise Forbidden("You can only modify your own invoices")
    return invoice


def _ensure_vendor_exists(session: Session, vendor_id: int) -> None:
    if VendorRepository(session).get(vendor_id) is None:
        raise NotFound("Vendor not found")


def create_invoice(
    session: Session,
    *,
    user_id: int,
    vendor_id: int,
    invoice_number: str,
    description: str,
    quantity: int,
    price_per_unit: float,
    total_price: float,
    payment_terms: str,
    due_date: datetime,
    invoice_file: str | None = None,
) -> Invoice:
    _ensure_vendor_exists(session, vendor_id)

    now = now_utc()
    invoice = Invoice(
        id=None,
        user_id=user_id,
        vendor_id=vendor_id,
        invoice_number=invoice_number,
        description=description,
        quantity=quantity,
        price_per_unit=price_per_unit,
        total_price=total_price,
        invoice_file=invoice_file,
        payment_terms=payment_terms,
        due_date=ensure_naive_utc(due_date),
        status=ApprovalStatus.PENDING,
        submission_date=now,
        created_at=now,
    )
    created = InvoiceRepository(session).create(invoice)

    create_notification(
        session,
        message="New invoice has been created",
        kind=NotificationType.INVOICE_UPDATE,
        link=f"/invoices/{created.id}",
    )
    return created


def update_invoice(
    session: Session,
    *,
    user_id: int,
    invoice_id: int,
    vendor_id: int | None = None,
    invoice_number: str | None = None,
    description: str | None = None,
    quantity: int | None = None,
    price_per_unit: float | None = None,
    total_price: float | None = None,
    payment_terms: str | None = None,
    due_date: datetime | None = None,
    invoice_file: str | None = None,
) -> Invoice:
    repository = InvoiceRepository(session)
    current = get_owned_invoice(repository, invoice_id=invoice_id, user_id=user_id)

    if vendor_id is not None and vendor_id != current.vendor_id:
        _ensure_vendor_exists(session, vendor_id)

    updated = replace(
        current,
        vendor_id=vendor_id if vendor_id is not None else current.vendor_id,
        invoice_number=(
            invoice_number if invoice_number is not None else current.invoice_number
        ),
        description=description if description is not None else current.description,
        quantity=quantity if quantity is not None else current.quantity,
        price_per_unit=(
            price_per_unit if price_per_unit is not None else current.price_per_unit
        ),
        total_price=total_price if total_price is not None else current.total_price,
        payment_terms=(
            payment_terms if payment_terms is not None else current.payment_terms
        ),
        due_date=ensure_naive_utc(due_date) if due_date is not None else current.due_date,
        invoice_file=invoice_file if invoice_file is not None else current.invoice_file,
        updated_at=now_utc(),
    )
    saved = repository.update(updated)

    create_notification(
        session,
        message="Invoice has been updated",
        kind=NotificationType.INVOICE_UPDATE,
        link=f"/invoices/{saved.id}",
    )
    return saved


def delete_invoice(session: Session, *, user_id: int, invoice_id: int) -> None:
    """Soft delete one of the caller's invoices."""

    repository = InvoiceRepository(session)
    current = get_owned_invoice(repository, invoice_id=invoice_id, user_id=user_id)
    repository.update(replace(current, deleted_at=now_utc()))

    create_notification(
        session,
        message="Invoice has been deleted",
        kind=NotificationType.INVOICE_UPDATE,
        link=f"/invoices/{invoice_id}",
    )


def list_user_invoices(session: Session, *, user_id: int) -> list[Invoice]:
    return list(InvoiceRepository(session).list_for_user(user_id))


__all__ = [
    "create_invoice",
    "delete_invoice",
    "get_owned_invoice",
    "list_user_invoices",
    "update_invoice",
]
