"""Use cases for reviewing customer invoices."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import (
    ApprovalStatus,
    AuthSession,
    Invoice,
    NotificationType,
)
from tradersbloc.domain.errors import NotFound
from tradersbloc.domain.pagination import Page, PageRequest, build_page
from tradersbloc.infrastructure.repositories import InvoiceRepository
from tradersbloc.utils import now_utc

from .filters import parse_status, resolve_due_dates


def list_invoices(
    session: Session,
    request: PageRequest,
    *,
    search: str | None = None,
    status: str | None = None,
    vendor: str | None = None,
    due_from: datetime | None = None,
    due_to: datetime | None = None,
    due_filter: str | None = None,
) -> Page[Invoice]:
    bounds = resolve_due_dates(due_from=due_from, due_to=due_to, preset=due_filter)
    items, total = InvoiceRepository(session).paginate(
        request,
        search=search,
        status=parse_status(status),
        vendor=vendor,
        due_from=bounds.lower,
        due_to=bounds.upper,
        due_before=bounds.before,
    )
    return build_page(items, total=total, request=request)


def get_invoice(session: Session, *, invoice_id: int) -> Invoice:
    invoice = InvoiceRepository(session).get(invoice_id)
    if invoice is None:
        raise NotFound("Invoice not found")
    return invoice


def update_invoice_status(
    session: Session,
    *,
    auth_session: AuthSession,
    invoice_id: int,
    status: ApprovalStatus,
) -> Invoice:
    """Record the review decision and notify the invoice owner."""

    repository = InvoiceRepository(session)
    invoice = get_invoice(session, invoice_id=invoice_id)
    status = ApprovalStatus(status)
    saved = repository.update(
        replace(
            invoice,
            status=status,
            review_date=now_utc(),
            reviewed_by=auth_session.identity_id,
            updated_at=now_utc(),
        )
    )

    create_notification(
        session,
        message=f"Invoice has been {status.value}",
        kind=NotificationType.INVOICE_STATUS_UPDATE,
        link=f"/invoices/{saved.id}",
        user_id=saved.user_id,
        acting_session=auth_session,
    )
    return saved


__all__ = ["get_invoice", "list_invoices", "update_invoice_status"]
