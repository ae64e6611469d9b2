"""Tests for the filter normalisation used by the admin listings."""

from datetime import datetime, timedelta, timezone

import pytest

from tradersbloc.application.use_cases.admins.filters import (
    parse_flag,
    parse_status,
    resolve_due_dates,
)
from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.domain.errors import BadRequest

NOW = datetime(2024, 2, 14, 15, 30)
TODAY = datetime(2024, 2, 14)


@pytest.mark.parametrize(
    ("preset", "lower", "before"),
    [
        ("overdue", None, TODAY),
        ("due-today", TODAY, TODAY + timedelta(days=1)),
        ("due-this-week", TODAY, TODAY + timedelta(days=7)),
        ("due-this-month", TODAY, datetime(2024, 2, 29)),
    ],
)
def test_presets_resolve_to_windows(preset, lower, before):
    bounds = resolve_due_dates(preset=preset, now=NOW)

    assert bounds.lower == lower
    assert bounds.before == before
    assert bounds.upper is None


def test_preset_overrides_explicit_range():
    bounds = resolve_due_dates(
        due_from=datetime(2020, 1, 1), due_to=datetime(2030, 1, 1), preset="due-today", now=NOW
    )

    assert bounds.lower == TODAY
    assert bounds.upper is None


def test_explicit_range_is_normalised_to_naive_utc():
    aware = datetime(2024, 3, 1, 12, tzinfo=timezone(timedelta(hours=2)))

    bounds = resolve_due_dates(due_from=aware, preset="all")

    assert bounds.lower == datetime(2024, 3, 1, 10)
    assert bounds.before is None


def test_unknown_preset_is_rejected():
    with pytest.raises(BadRequest):
        resolve_due_dates(preset="next-decade")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("all", None), ("pending", ApprovalStatus.PENDING), ("APPROVED", ApprovalStatus.APPROVED)],
)
def test_parse_status(raw, expected):
    assert parse_status(raw) is expected


def test_parse_status_rejects_unknown_values():
    with pytest.raises(BadRequest):
        parse_status("archived")


def test_parse_flag():
    assert parse_flag("paid", true_value="paid", false_value="unpaid") is True
    assert parse_flag("unpaid", true_value="paid", false_value="unpaid") is False
    assert parse_flag(None, true_value="paid", false_value="unpaid") is None
    with pytest.raises(BadRequest):
        parse_flag("maybe", true_value="paid", false_value="unpaid")
