"""Persistence layer for the staff activity log."""

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ActivityLog, NotificationType
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import ActivityLogModel


class ActivityLogRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: ActivityLog) -> ActivityLog:
        model = ActivityLogModel(
            admin_id=entry.admin_id,
            action=entry.action,
            type=NotificationType(entry.type).value,
        )
        with persistence_guard(
            self.session, failure_message="Failed to record admin activity"
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_recent_for_admin(self, admin_id: int, limit: int = 10) -> list[ActivityLog]:
        query = (
            self.session.query(ActivityLogModel)
            .filter(ActivityLogModel.admin_id == admin_id)
            .order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityLog:
        return ActivityLog(
            id=model.id,
            admin_id=model.admin_id,
            action=model.action,
            type=NotificationType(model.type),
            created_at=model.created_at,
        )


__all__ = ["ActivityLogRepository"]
