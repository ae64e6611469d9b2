"""SQLAlchemy models for persisted notifications and staff activity."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc

notification_admin_table = Table(
    "notification_admin",
    Base.metadata,
    Column(
        "notification_id",
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "admin_id",
        Integer,
        ForeignKey("admin.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class NotificationModel(Base):
    """Notification addressed to a set of admins or to one end customer."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    message = Column(Text, nullable=False)
    type = Column(String(40), nullable=False)
    link = Column(String(255), nullable=False)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    deleted_at = Column(DateTime, nullable=True)

    admins = relationship(
        "AdminModel",
        secondary=notification_admin_table,
        back_populates="notifications",
        lazy="selectin",
    )


class ActivityLogModel(Base):
    """Append-only log of staff actions."""

    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    admin_id = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True, index=True
    )
    action = Column(Text, nullable=False)
    type = Column(String(40), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc)


__all__ = ["ActivityLogModel", "NotificationModel", "notification_admin_table"]
