"""Create notifications for domain events and record staff activity."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import (
    ActivityLog,
    AuthSession,
    DeliveryClass,
    Notification,
    NotificationType,
    Role,
    classify_notification_type,
)
from tradersbloc.infrastructure.repositories import (
    ActivityLogRepository,
    AdminRepository,
    NotificationRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


def log_admin_activity(
    session: Session,
    *,
    admin_id: int,
    action: str,
    kind: NotificationType | str,
) -> ActivityLog:
    """Append one entry to the staff activity log."""

    entry = ActivityLog(
        id=None,
        admin_id=admin_id,
        action=action,
        type=NotificationType(kind),
    )
    return ActivityLogRepository(session).create(entry)


def create_notification(
    session: Session,
    *,
    message: str,
    kind: NotificationType | str,
    link: str,
    user_id: int | None = None,
    acting_session: AuthSession | None = None,
) -> Notification | None:
    """Persist the notification implied by ``kind``.

    Broadcast kinds are addressed to every admin whose role is exactly
    ``ADMIN``. Targeted kinds are addressed to ``user_id`` and, when
    ``acting_session`` belongs to a staff member, also append an activity
    log entry for them. Any other kind creates nothing and returns ``None``.
    """

    delivery = classify_notification_type(kind)

    if delivery is DeliveryClass.BROADCAST:
        admin_ids = AdminRepository(session).list_ids_by_role(Role.ADMIN)
        notification = Notification(
            id=None,
            message=message,
            type=NotificationType(kind),
            link=link,
            admin_ids=set(admin_ids),
        )
        return NotificationRepository(session).create(notification)

    if delivery is DeliveryClass.TARGETED:
        recipient = UserRepository(session).get(user_id)
        if recipient is None:
            logger.warning(
                "Notification %s targets unknown user %s; storing it without recipient",
                kind,
                user_id,
            )
        notification = Notification(
            id=None,
            message=message,
            type=NotificationType(kind),
            link=link,
            user_id=recipient.id if recipient else None,
        )
        saved = NotificationRepository(session).create(notification)
        if acting_session is not None and acting_session.is_staff:
            log_admin_activity(
                session,
                admin_id=acting_session.identity_id,
                action=message,
                kind=kind,
            )
        return saved

    logger.info("Notification kind %s is not dispatched", kind)
    return None


__all__ = ["create_notification", "log_admin_activity"]
