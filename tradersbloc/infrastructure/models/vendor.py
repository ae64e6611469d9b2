"""SQLAlchemy model for invoice vendors."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class VendorModel(Base):
    __tablename__ = "vendor"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, index=True)
    contact_person = Column(String(120), nullable=False)
    contact_person_phone_number = Column(String(30), nullable=False)
    phone_number = Column(String(30), nullable=False)
    address = Column(String(255), nullable=False)
    email = Column(String(120), nullable=False)
    bank_name = Column(String(120), nullable=False)
    bank_account_number = Column(String(60), nullable=False)
    created_by = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)


__all__ = ["VendorModel"]
