"""Use cases for reviewing funding requests."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import (
    ApprovalStatus,
    AuthSession,
    FundingRequest,
    NotificationType,
)
from tradersbloc.domain.errors import NotFound
from tradersbloc.domain.pagination import Page, PageRequest, build_page
from tradersbloc.infrastructure.repositories import FundingRequestRepository
from tradersbloc.utils import ensure_naive_utc, now_utc

from .filters import parse_flag, parse_status


def list_funding_requests(
    session: Session,
    request: PageRequest,
    *,
    search: str | None = None,
    status: str | None = None,
    review_status: str | None = None,
    submitted_from: datetime | None = None,
    submitted_to: datetime | None = None,
    amount_min: float | None = None,
    amount_max: float | None = None,
    contribution_min: float | None = None,
    contribution_max: float | None = None,
) -> Page[FundingRequest]:
    items, total = FundingRequestRepository(session).paginate(
        request,
        search=search,
        status=parse_status(status),
        reviewed=parse_flag(review_status, true_value="reviewed", false_value="pending"),
        submitted_from=ensure_naive_utc(submitted_from),
        submitted_to=ensure_naive_utc(submitted_to),
        amount_min=amount_min,
        amount_max=amount_max,
        contribution_min=contribution_min,
        contribution_max=contribution_max,
    )
    return build_page(items, total=total, request=request)


def get_funding_request(session: Session, *, funding_request_id: int) -> FundingRequest:
    funding_request = FundingRequestRepository(session).get(funding_request_id)
    if funding_request is None:
        raise NotFound("Funding request not found")
    return funding_request


def update_funding_request_status(
    session: Session,
    *,
    auth_session: AuthSession,
    funding_request_id: int,
    status: ApprovalStatus,
) -> FundingRequest:
    repository = FundingRequestRepository(session)
    funding_request = get_funding_request(session, funding_request_id=funding_request_id)
    status = ApprovalStatus(status)
    saved = repository.update(
        replace(
            funding_request,
            status=status,
            review_date=now_utc(),
            reviewed_by=auth_session.identity_id,
            updated_at=now_utc(),
        )
    )

    create_notification(
        session,
        message=f"Funding request has been {status.value}",
        kind=NotificationType.FUNDING_STATUS_UPDATE,
        link=f"/funding-requests/{saved.id}",
        user_id=saved.user_id,
        acting_session=auth_session,
    )
    return saved


__all__ = [
    "get_funding_request",
    "list_funding_requests",
    "update_funding_request_status",
]
