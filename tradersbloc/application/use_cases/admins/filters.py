"""Filter normalisation shared by the admin listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.domain.errors import BadRequest
from tradersbloc.utils import DUE_DATE_PRESETS, due_date_window, ensure_naive_utc


@dataclass(frozen=True)
class DueDateBounds:
    """Inclusive ``lower``/``upper`` bounds plus an exclusive ``before`` bound."""

    lower: datetime | None = None
    upper: datetime | None = None
    before: datetime | None = None


def resolve_due_dates(
    *,
    due_from: datetime | None = None,
    due_to: datetime | None = None,
    preset: str | None = None,
    now: datetime | None = None,
) -> DueDateBounds:
    """Return the due-date bounds for an explicit range or a named preset.

    A preset other than ``"all"`` replaces the explicit range.
    """

    if preset and preset != "all":
        if preset not in DUE_DATE_PRESETS:
            allowed = ", ".join(DUE_DATE_PRESETS)
            raise BadRequest(f"Unsupported due date filter '{preset}'. Allowed: {allowed}")
        lower, before = due_date_window(preset, now=now)
        return DueDateBounds(lower=lower, before=before)
    return DueDateBounds(lower=ensure_naive_utc(due_from), upper=ensure_naive_utc(due_to))


def parse_status(status: str | None) -> ApprovalStatus | None:
    """Return ``status`` as an :class:`ApprovalStatus`; ``"all"`` disables the filter."""

    if not status or status.lower() == "all":
        return None
    try:
        return ApprovalStatus(status.upper())
    except ValueError as exc:
        raise BadRequest(f"Unsupported status '{status}'") from exc


def parse_flag(value: str | None, *, true_value: str, false_value: str) -> bool | None:
    """Map a two-valued filter such as ``paid``/``unpaid`` to a boolean."""

    if not value or value == "all":
        return None
    if value == true_value:
        return True
    if value == false_value:
        return False
    raise BadRequest(f"Unsupported filter '{value}'")


__all__ = ["DueDateBounds", "parse_flag", "parse_status", "resolve_due_dates"]
