"""Use case assembling the admin dashboard."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ActivityLog, Admin, ApprovalStatus, Notification
from tradersbloc.infrastructure.repositories import (
    ActivityLogRepository,
    FundingRequestRepository,
    InvoiceRepository,
    MilestoneRepository,
    NotificationRepository,
)

from .profile import get_admin_profile

RECENT_ACTIVITY_LIMIT = 10


@dataclass
class DashboardSummary:
    admin: Admin
    pending_invoices: int
    pending_fund_requests: int
    pending_milestones: int
    total_funded: float
    recent_activity: list[ActivityLog] = field(default_factory=list)
    unread_notifications: list[Notification] = field(default_factory=list)


def get_dashboard_summary(session: Session, *, admin_id: int) -> DashboardSummary:
    admin = get_admin_profile(session, admin_id=admin_id)
    funding_requests = FundingRequestRepository(session)

    return DashboardSummary(
        admin=admin,
        pending_invoices=InvoiceRepository(session).count_by_status(
            ApprovalStatus.PENDING
        ),
        pending_fund_requests=funding_requests.count_by_status(ApprovalStatus.PENDING),
        pending_milestones=MilestoneRepository(session).count_by_status(
            ApprovalStatus.PENDING
        ),
        total_funded=funding_requests.sum_requested_between(
            status=ApprovalStatus.APPROVED
        ),
        recent_activity=ActivityLogRepository(session).list_recent_for_admin(
            admin_id, limit=RECENT_ACTIVITY_LIMIT
        ),
        unread_notifications=NotificationRepository(session).list_for_admin(
            admin_id, unread_only=True
        ),
    )


__all__ = ["DashboardSummary", "get_dashboard_summary"]
