"""Helpers for working with naive UTC datetimes and reporting windows."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Final

TIME_RANGES: Final[tuple[str, ...]] = ("week", "month", "year")
DUE_DATE_PRESETS: Final[tuple[str, ...]] = (
    "all",
    "overdue",
    "due-today",
    "due-this-week",
    "due-this-month",
)


def now_utc() -> datetime:
    """Return the current UTC time without attaching ``tzinfo``.

    Every ``DateTime`` column is stored naive and expressed in UTC so the same
    values round-trip through SQLite and PostgreSQL.
    """

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def ensure_naive_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` to a naive UTC datetime."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _shift_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def shift_back(value: datetime, time_range: str) -> datetime:
    """Return ``value`` moved one ``time_range`` (week, month or year) back."""

    if time_range == "week":
        return value - timedelta(days=7)
    if time_range == "month":
        return _shift_months(value, -1)
    if time_range == "year":
        return _shift_months(value, -12)
    raise ValueError(f"Unsupported time range '{time_range}'")


def due_date_window(
    preset: str, *, now: datetime | None = None
) -> tuple[datetime | None, datetime | None] | None:
    """Return the ``(from_inclusive, to_exclusive)`` bounds for a due-date preset.

    ``None`` means the preset does not restrict the due date (``"all"``).
    """

    if preset == "all":
        return None

    today = start_of_day(now or now_utc())
    if preset == "overdue":
        return None, today
    if preset == "due-today":
        return today, today + timedelta(days=1)
    if preset == "due-this-week":
        return today, today + timedelta(days=7)
    if preset == "due-this-month":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today, today.replace(day=last_day)
    raise ValueError(f"Unsupported due date filter '{preset}'")


__all__ = [
    "DUE_DATE_PRESETS",
    "TIME_RANGES",
    "due_date_window",
    "ensure_naive_utc",
    "now_utc",
    "shift_back",
    "start_of_day",
]
