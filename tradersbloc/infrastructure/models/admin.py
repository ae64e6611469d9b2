"""SQLAlchemy model for staff principals."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from tradersbloc.domain.entities import AdminStatus
from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class AdminModel(Base):
    """Database representation of an administrator or super-administrator."""

    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)
    status = Column(
        String(20),
        nullable=False,
        default=AdminStatus.ACTIVE.value,
        server_default=AdminStatus.ACTIVE.value,
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)

    notifications = relationship(
        "NotificationModel",
        secondary="notification_admin",
        back_populates="admins",
    )


__all__ = ["AdminModel"]
