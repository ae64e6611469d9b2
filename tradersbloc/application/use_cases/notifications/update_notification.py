"""Use cases toggling the read flag of a notification."""

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import AuthSession, Notification, Role
from tradersbloc.domain.errors import Forbidden, NotFound
from tradersbloc.infrastructure.repositories import NotificationRepository


def update_user_notification(
    session: Session, *, user_id: int, notification_id: int, is_read: bool
) -> Notification:
    """Set ``is_read`` on a notification addressed to ``user_id``."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or notification.user_id != user_id:
        raise NotFound("Notification not found")
    return repository.set_read(notification_id, is_read)


def mark_admin_notification_as_read(
    session: Session, *, auth_session: AuthSession, notification_id: int
) -> Notification:
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFound("Notification not found")
    if (
        auth_session.identity_id not in notification.admin_ids
        and auth_session.role != Role.SUPER_ADMIN
    ):
        raise Forbidden("Notification is not addressed to you")
    return repository.set_read(notification_id, True)


__all__ = ["mark_admin_notification_as_read", "update_user_notification"]
