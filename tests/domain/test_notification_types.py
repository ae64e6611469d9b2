"""Tests for the notification delivery taxonomy."""

import pytest

from tradersbloc.domain.entities import (
    DeliveryClass,
    NotificationType,
    classify_notification_type,
)


@pytest.mark.parametrize(
    "kind",
    [
        NotificationType.FUNDING_UPDATE,
        NotificationType.INVOICE_UPDATE,
        NotificationType.MILESTONE_UPDATE,
    ],
)
def test_submission_kinds_are_broadcast(kind):
    assert classify_notification_type(kind) is DeliveryClass.BROADCAST


@pytest.mark.parametrize(
    "kind",
    [
        NotificationType.FUNDING_STATUS_UPDATE,
        NotificationType.INVOICE_STATUS_UPDATE,
        NotificationType.MILESTONE_STATUS_UPDATE,
        NotificationType.KYC_STATUS_UPDATE,
    ],
)
def test_review_kinds_are_targeted(kind):
    assert classify_notification_type(kind) is DeliveryClass.TARGETED


@pytest.mark.parametrize("kind", [NotificationType.SYSTEM_ALERT, "SOMETHING_ELSE"])
def test_other_kinds_are_not_dispatched(kind):
    assert classify_notification_type(kind) is DeliveryClass.UNHANDLED
