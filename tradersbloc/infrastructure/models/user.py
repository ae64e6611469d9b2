"""SQLAlchemy model for end customers."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class UserModel(Base):
    """Database representation of an end customer."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(80), nullable=False)
    last_name = Column(String(80), nullable=False)
    phone_number = Column(String(30), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    company_name = Column(String(120), nullable=False)
    tax_id = Column(String(50), nullable=False)
    industry = Column(String(80), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)

    invoices = relationship(
        "InvoiceModel", back_populates="user", foreign_keys="InvoiceModel.user_id"
    )
    milestones = relationship(
        "MilestoneModel", back_populates="user", foreign_keys="MilestoneModel.user_id"
    )
    funding_requests = relationship(
        "FundingRequestModel",
        back_populates="user",
        foreign_keys="FundingRequestModel.user_id",
    )
    kyc_documents = relationship(
        "KYCDocumentModel",
        back_populates="user",
        foreign_keys="KYCDocumentModel.user_id",
    )


__all__ = ["UserModel"]
