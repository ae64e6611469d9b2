"""Tests for the admin report aggregation."""

from dataclasses import replace
from datetime import datetime

import pytest

from factories import make_invoice, make_user, make_vendor
from tradersbloc.application.use_cases.admins import calculate_growth, get_report_data
from tradersbloc.domain.errors import BadRequest
from tradersbloc.infrastructure.repositories import InvoiceRepository

NOW = datetime(2024, 6, 30, 12)


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [(10, 5, 100.0), (5, 10, -50.0), (7, 0, 0.0), (0, 0, 0.0)],
)
def test_calculate_growth(current, previous, expected):
    assert calculate_growth(current, previous) == pytest.approx(expected)


def test_unknown_time_range_is_rejected(session):
    with pytest.raises(BadRequest):
        get_report_data(session, time_range="decade", now=NOW)


def test_month_report_compares_with_the_previous_month(session, hasher):
    user = make_user(session, hasher, created_at=datetime(2024, 6, 1))
    vendor = make_vendor(session)
    make_invoice(
        session,
        user_id=user.id,
        vendor_id=vendor.id,
        invoice_number="INV-1",
        total_price=100,
        submitted_at=datetime(2024, 6, 10, 9),
    )
    make_invoice(
        session,
        user_id=user.id,
        vendor_id=vendor.id,
        invoice_number="INV-2",
        total_price=300,
        submitted_at=datetime(2024, 6, 10, 17),
    )
    make_invoice(
        session,
        user_id=user.id,
        vendor_id=vendor.id,
        invoice_number="INV-3",
        total_price=200,
        submitted_at=datetime(2024, 5, 10),
    )

    report = get_report_data(session, time_range="month", now=NOW)

    assert report.total_invoices == 2
    assert report.invoice_growth == pytest.approx(100.0)
    assert report.total_amount == pytest.approx(400.0)
    assert report.amount_growth == pytest.approx(100.0)
    assert report.active_users == 1
    assert report.user_growth == 0.0
    assert [(t.date, t.amount, t.count) for t in report.invoice_trends] == [
        ("2024-06-10", 400.0, 2)
    ]
    assert [(s.name, s.value) for s in report.status_distribution] == [("PENDING", 3)]
    assert [(d.date, d.new_users) for d in report.user_activity] == [("2024-06-01", 1)]


def test_soft_deleted_invoices_are_excluded(session, hasher):
    user = make_user(session, hasher, created_at=datetime(2024, 6, 1))
    vendor = make_vendor(session)
    invoice = make_invoice(
        session,
        user_id=user.id,
        vendor_id=vendor.id,
        submitted_at=datetime(2024, 6, 20),
    )
    InvoiceRepository(session).update(replace(invoice, deleted_at=datetime(2024, 6, 21)))

    report = get_report_data(session, time_range="week", now=NOW)

    assert report.total_invoices == 0
    assert report.total_amount == 0.0
    assert report.status_distribution == []
