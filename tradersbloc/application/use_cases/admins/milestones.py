"""Use cases for reviewing invoice milestones."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import (
    ApprovalStatus,
    AuthSession,
    Milestone,
    NotificationType,
)
from tradersbloc.domain.errors import NotFound
from tradersbloc.domain.pagination import Page, PageRequest, build_page
from tradersbloc.infrastructure.repositories import MilestoneRepository
from tradersbloc.utils import now_utc

from .filters import parse_flag, parse_status, resolve_due_dates


def list_milestones(
    session: Session,
    request: PageRequest,
    *,
    search: str | None = None,
    status: str | None = None,
    due_from: datetime | None = None,
    due_to: datetime | None = None,
    due_filter: str | None = None,
    payment_status: str | None = None,
    amount_min: float | None = None,
    amount_max: float | None = None,
) -> Page[Milestone]:
    bounds = resolve_due_dates(due_from=due_from, due_to=due_to, preset=due_filter)
    items, total = MilestoneRepository(session).paginate(
        request,
        search=search,
        status=parse_status(status),
        paid=parse_flag(payment_status, true_value="paid", false_value="unpaid"),
        due_from=bounds.lower,
        due_to=bounds.upper,
        due_before=bounds.before,
        amount_min=amount_min,
        amount_max=amount_max,
    )
    return build_page(items, total=total, request=request)


def get_milestone(session: Session, *, milestone_id: int) -> Milestone:
    milestone = MilestoneRepository(session).get(milestone_id)
    if milestone is None:
        raise NotFound("Milestone not found")
    return milestone


def update_milestone_status(
    session: Session,
    *,
    auth_session: AuthSession,
    milestone_id: int,
    status: ApprovalStatus,
) -> Milestone:
    repository = MilestoneRepository(session)
    milestone = get_milestone(session, milestone_id=milestone_id)
    status = ApprovalStatus(status)
    saved = repository.update(
        replace(
            milestone,
            status=status,
            reviewed_by=auth_session.identity_id,
            updated_at=now_utc(),
        )
    )

    create_notification(
        session,
        message=f"Milestone has been {status.value}",
        kind=NotificationType.MILESTONE_STATUS_UPDATE,
        link=f"/milestone/{saved.id}",
        user_id=saved.user_id,
        acting_session=auth_session,
    )
    return saved


__all__ = ["get_milestone", "list_milestones", "update_milestone_status"]
