"""Use case computing the admin reporting view."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.domain.errors import BadRequest
from tradersbloc.infrastructure.repositories import (
    InvoiceRepository,
    MilestoneRepository,
    UserRepository,
)
from tradersbloc.utils import TIME_RANGES, now_utc, shift_back


@dataclass(frozen=True)
class InvoiceTrend:
    date: str
    amount: float
    count: int


@dataclass(frozen=True)
class StatusCount:
    name: str
    value: int


@dataclass(frozen=True)
class MilestoneProgress:
    name: str
    completed: int
    pending: int


@dataclass(frozen=True)
class UserActivity:
    date: str
    new_users: int


@dataclass
class ReportData:
    total_invoices: int
    invoice_growth: float
    active_users: int
    user_growth: float
    total_milestones: int
    milestone_growth: float
    total_amount: float
    amount_growth: float
    invoice_trends: list[InvoiceTrend] = field(default_factory=list)
    status_distribution: list[StatusCount] = field(default_factory=list)
    milestone_progress: list[MilestoneProgress] = field(default_factory=list)
    user_activity: list[UserActivity] = field(default_factory=list)


def calculate_growth(current: float, previous: float) -> float:
    """Return the percentage change from ``previous``; ``0`` when it is zero."""

    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def get_report_data(
    session: Session, *, time_range: str, now: datetime | None = None
) -> ReportData:
    """Compare the current ``time_range`` window with the one before it."""

    if time_range not in TIME_RANGES:
        allowed = ", ".join(TIME_RANGES)
        raise BadRequest(f"Unsupported time range '{time_range}'. Allowed: {allowed}")

    start = shift_back(now or now_utc(), time_range)
    previous_start = shift_back(start, time_range)

    invoices = InvoiceRepository(session)
    users = UserRepository(session)
    milestones = MilestoneRepository(session)

    total_invoices = invoices.count_submitted_between(start)
    previous_invoices = invoices.count_submitted_between(previous_start, start)
    active_users = users.count_created_between(start)
    previous_users = users.count_created_between(previous_start, start)
    total_milestones = milestones.count_created_between(start)
    previous_milestones = milestones.count_created_between(previous_start, start)
    total_amount = invoices.sum_total_between(start)
    previous_amount = invoices.sum_total_between(previous_start, start)
    milestone_statuses = milestones.status_counts()

    return ReportData(
        total_invoices=total_invoices,
        invoice_growth=calculate_growth(total_invoices, previous_invoices),
        active_users=active_users,
        user_growth=calculate_growth(active_users, previous_users),
        total_milestones=total_milestones,
        milestone_growth=calculate_growth(total_milestones, previous_milestones),
        total_amount=total_amount,
        amount_growth=calculate_growth(total_amount, previous_amount),
        invoice_trends=[
            InvoiceTrend(date=day, amount=amount, count=count)
            for day, amount, count in invoices.trends_since(start)
        ],
        status_distribution=[
            StatusCount(name=status, value=count)
            for status, count in sorted(invoices.status_distribution().items())
        ],
        milestone_progress=[
            MilestoneProgress(
                name="Milestones",
                completed=milestone_statuses.get(ApprovalStatus.APPROVED.value, 0),
                pending=milestone_statuses.get(ApprovalStatus.PENDING.value, 0),
            )
        ],
        user_activity=[
            UserActivity(date=day, new_users=count)
            for day, count in users.new_users_per_day(start)
        ],
    )


__all__ = [
    "InvoiceTrend",
    "MilestoneProgress",
    "ReportData",
    "StatusCount",
    "UserActivity",
    "calculate_growth",
    "get_report_data",
]
