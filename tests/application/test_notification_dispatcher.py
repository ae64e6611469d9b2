"""Tests for notification creation and staff activity logging."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from factories import make_admin, make_user
from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import AuthSession, NotificationType, Role
from tradersbloc.domain.errors import Internal
from tradersbloc.infrastructure.repositories import (
    ActivityLogRepository,
    NotificationRepository,
)


def test_broadcast_reaches_every_plain_admin(session, hasher):
    first = make_admin(session, hasher, email="first@example.com")
    second = make_admin(session, hasher, email="second@example.com")
    make_admin(session, hasher, email="root@example.com", role=Role.SUPER_ADMIN)

    notification = create_notification(
        session,
        message="New invoice INV-001 submitted",
        kind=NotificationType.INVOICE_UPDATE,
        link="/invoices/1",
    )

    assert notification is not None
    assert notification.admin_ids == {first.id, second.id}
    assert notification.user_id is None
    assert notification.is_read is False


def test_broadcast_without_admins_is_still_stored(session):
    notification = create_notification(
        session,
        message="New funding request",
        kind="FUNDING_UPDATE",
        link="/funding-requests/1",
    )

    assert notification is not None
    assert notification.id is not None
    assert notification.admin_ids == set()


def test_targeted_notification_is_addressed_to_the_user(session, hasher):
    user = make_user(session, hasher)

    notification = create_notification(
        session,
        message="Your invoice has been approved",
        kind=NotificationType.INVOICE_STATUS_UPDATE,
        link="/invoices/1",
        user_id=user.id,
    )

    assert notification.user_id == user.id
    assert notification.admin_ids == set()
    assert [n.id for n in NotificationRepository(session).list_for_user(user.id)] == [
        notification.id
    ]


def test_targeted_notification_logs_the_acting_admin(session, hasher):
    user = make_user(session, hasher)
    admin = make_admin(session, hasher)
    acting = AuthSession(identity_id=admin.id, email=admin.email, role=admin.role)

    create_notification(
        session,
        message="KYC document approved",
        kind=NotificationType.KYC_STATUS_UPDATE,
        link="/kyc/1",
        user_id=user.id,
        acting_session=acting,
    )

    entries = ActivityLogRepository(session).list_recent_for_admin(admin.id)
    assert len(entries) == 1
    assert entries[0].action == "KYC document approved"
    assert entries[0].type is NotificationType.KYC_STATUS_UPDATE


def test_targeted_notification_without_session_skips_activity_log(session, hasher):
    user = make_user(session, hasher)
    admin = make_admin(session, hasher)

    create_notification(
        session,
        message="Milestone approved",
        kind=NotificationType.MILESTONE_STATUS_UPDATE,
        link="/milestone/1",
        user_id=user.id,
    )

    assert ActivityLogRepository(session).list_recent_for_admin(admin.id) == []


def test_targeted_notification_with_customer_session_skips_activity_log(session, hasher):
    user = make_user(session, hasher)
    admin = make_admin(session, hasher)
    acting = AuthSession(identity_id=user.id, email=user.email, role=Role.ORDINARY_USER)

    notification = create_notification(
        session,
        message="Invoice approved",
        kind=NotificationType.INVOICE_STATUS_UPDATE,
        link="/invoices/1",
        user_id=user.id,
        acting_session=acting,
    )

    assert notification.user_id == user.id
    assert ActivityLogRepository(session).list_recent_for_admin(user.id) == []
    assert ActivityLogRepository(session).list_recent_for_admin(admin.id) == []


def test_targeted_notification_for_unknown_user_has_no_recipient(session):
    notification = create_notification(
        session,
        message="Funding approved",
        kind=NotificationType.FUNDING_STATUS_UPDATE,
        link="/funding-requests/9",
        user_id=999,
    )

    assert notification is not None
    assert notification.user_id is None


@pytest.mark.parametrize("kind", [NotificationType.SYSTEM_ALERT, "UNKNOWN_KIND"])
def test_unhandled_kinds_create_nothing(session, hasher, kind):
    make_admin(session, hasher)

    result = create_notification(session, message="Ignored", kind=kind, link="/")

    assert result is None


def test_storage_failure_surfaces_as_internal_error(session, monkeypatch):
    def failing_commit():
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(Internal):
        create_notification(
            session,
            message="New invoice",
            kind=NotificationType.INVOICE_UPDATE,
            link="/invoices/1",
        )
