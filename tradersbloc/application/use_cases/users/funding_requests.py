"""Use case for requesting financing against an invoice."""

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import ApprovalStatus, FundingRequest, NotificationType
from tradersbloc.infrastructure.repositories import (
    FundingRequestRepository,
    InvoiceRepository,
)
from tradersbloc.utils import now_utc

from .invoices import get_owned_invoice


def create_funding_request(
    session: Session,
    *,
    user_id: int,
    invoice_id: int,
    requested_amount: float,
    your_contribution: float,
) -> FundingRequest:
    get_owned_invoice(InvoiceRepository(session), invoice_id=invoice_id, user_id=user_id)

    now = now_utc()
    funding_request = FundingRequest(
        id=None,
        user_id=user_id,
        invoice_id=invoice_id,
        requested_amount=requested_amount,
        your_contribution=your_contribution,
        status=ApprovalStatus.PENDING,
        submission_date=now,
        created_at=now,
    )
    created = FundingRequestRepository(session).create(funding_request)

    create_notification(
        session,
        message="New funding request has been created",
        kind=NotificationType.FUNDING_UPDATE,
        link=f"/funding-requests/{created.id}",
    )
    return created


__all__ = ["create_funding_request"]
