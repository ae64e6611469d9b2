"""Persistence layer for notifications."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Notification, NotificationType
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import AdminModel, NotificationModel


class NotificationRepository:
    """Provide persistence for :class:`Notification` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            message=notification.message,
            type=NotificationType(notification.type).value,
            link=notification.link,
            is_read=notification.is_read,
            user_id=notification.user_id,
        )
        with persistence_guard(
            self.session, failure_message="Failed to create notification"
        ):
            model.admins = self._load_admins(notification.admin_ids)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def get(self, notification_id: int) -> Notification | None:
        model = self._get_model(notification_id)
        return self._to_entity(model) if model else None

    def set_read(self, notification_id: int, is_read: bool) -> Notification:
        model = self._get_model(notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        model.is_read = is_read
        with persistence_guard(
            self.session, failure_message="Failed to update notification"
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(self, user_id: int) -> list[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.deleted_at.is_(None))
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_admin(
        self, admin_id: int, *, unread_only: bool = False
    ) -> list[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.admins.any(AdminModel.id == admin_id))
            .filter(NotificationModel.deleted_at.is_(None))
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def _load_admins(self, admin_ids: Iterable[int]) -> list[AdminModel]:
        ids = sorted(set(admin_ids))
        if not ids:
            return []
        return self.session.query(AdminModel).filter(AdminModel.id.in_(ids)).all()

    def _get_model(self, notification_id: int) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            message=model.message,
            type=NotificationType(model.type),
            link=model.link,
            admin_ids={admin.id for admin in model.admins},
            user_id=model.user_id,
            is_read=model.is_read,
            created_at=model.created_at,
            deleted_at=model.deleted_at,
        )


__all__ = ["NotificationRepository"]
