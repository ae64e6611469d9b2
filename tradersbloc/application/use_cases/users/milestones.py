"""Use cases for the payment milestones attached to a customer's invoices."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import ApprovalStatus, Milestone, NotificationType
from tradersbloc.domain.errors import Forbidden, NotFound
from tradersbloc.infrastructure.repositories import (
    InvoiceRepository,
    MilestoneRepository,
)
from tradersbloc.utils import ensure_naive_utc, now_utc

from .invoices import get_owned_invoice


def _get_owned_milestone(
    repository: MilestoneRepository, *, milestone_id: int, user_id: int
) -> Milestone:
    milestone = repository.get(milestone_id)
    if milestone is None:
        raise NotFound("Milestone not found")
    if milestone.user_id != user_id:
        raise Forbidden("You can only modify your own milestones")
    return milestone


def create_milestone(
    session: Session,
    *,
    user_id: int,
    invoice_id: int,
    title: str,
    description: str,
    bank_account_no: str,
    bank_name: str,
    payment_amount: float,
    due_date: datetime,
    supporting_doc: str | None = None,
) -> Milestone:
    get_owned_invoice(InvoiceRepository(session), invoice_id=invoice_id, user_id=user_id)

    milestone = Milestone(
        id=None,
        user_id=user_id,
        invoice_id=invoice_id,
        title=title,
        description=description,
        supporting_doc=supporting_doc,
        bank_account_no=bank_account_no,
        bank_name=bank_name,
        payment_amount=payment_amount,
        due_date=ensure_naive_utc(due_date),
        status=ApprovalStatus.PENDING,
        created_at=now_utc(),
    )
    created = MilestoneRepository(session).create(milestone)

    create_notification(
        session,
        message="New milestone has been created",
        kind=NotificationType.MILESTONE_UPDATE,
        link=f"/milestone/{created.id}",
    )
    return created


def update_milestone(
    session: Session,
    *,
    user_id: int,
    milestone_id: int,
    title: str | None = None,
    description: str | None = None,
    supporting_doc: str | None = None,
    bank_account_no: str | None = None,
    bank_name: str | None = None,
    payment_amount: float | None = None,
    due_date: datetime | None = None,
) -> Milestone:
    repository = MilestoneRepository(session)
    current = _get_owned_milestone(repository, milestone_id=milestone_id, user_id=user_id)

    updated = replace(
        current,
        title=title if title is not None else current.title,
        description=description if description is not None else current.description,
        supporting_doc=(
            supporting_doc if supporting_doc is not None else current.supporting_doc
        ),
        bank_account_no=(
            bank_account_no if bank_account_no is not None else current.bank_account_no
        ),
        bank_name=bank_name if bank_name is not None else current.bank_name,
        payment_amount=(
            payment_amount if payment_amount is not None else current.payment_amount
        ),
        due_date=ensure_naive_utc(due_date) if due_date is not None else current.due_date,
        updated_at=now_utc(),
    )
    saved = repository.update(updated)

    create_notification(
        session,
        message="Milestone has been updated",
        kind=NotificationType.MILESTONE_UPDATE,
        link=f"/milestone/{saved.id}",
    )
    return saved


def delete_milestone(session: Session, *, user_id: int, milestone_id: int) -> None:
    """Soft delete one of the caller's milestones."""

    repository = MilestoneRepository(session)
    current = _get_owned_milestone(repository, milestone_id=milestone_id, user_id=user_id)
    repository.update(replace(current, deleted_at=now_utc()))

    create_notification(
        session,
        message="Milestone has been deleted",
        kind=NotificationType.MILESTONE_UPDATE,
        link=f"/milestone/{milestone_id}",
    )


__all__ = ["create_milestone", "delete_milestone", "update_milestone"]
