"""SQLAlchemy model for application-only users."""

from sqlalchemy import Column, Date, DateTime, Integer, String

from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class AppUserModel(Base):
    __tablename__ = "app_user"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(80), nullable=False)
    last_name = Column(String(80), nullable=False)
    phone_number = Column(String(30), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    profile_picture = Column(String(500), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)


__all__ = ["AppUserModel"]
