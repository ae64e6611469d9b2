"""SQLAlchemy model for KYC documents."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class KYCDocumentModel(Base):
    """One document per user and document type."""

    __tablename__ = "kyc_document"
    __table_args__ = (
        UniqueConstraint("user_id", "document_type", name="uq_kyc_user_document_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    document_type = Column(String(60), nullable=False)
    document_url = Column(String(500), nullable=False)
    file_name = Column(String(255), nullable=True)
    status = Column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    submission_date = Column(DateTime, nullable=False, default=now_utc)
    review_date = Column(DateTime, nullable=True)
    reviewed_by_id = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True
    )

    user = relationship("UserModel", back_populates="kyc_documents", lazy="joined")


__all__ = ["KYCDocumentModel"]
