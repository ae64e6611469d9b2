"""SQLAlchemy model for funding requests raised against invoices."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class FundingRequestModel(Base):
    __tablename__ = "funding_request"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    invoice_id = Column(Integer, ForeignKey("invoice.id"), nullable=False, index=True)
    requested_amount = Column(Float, nullable=False)
    your_contribution = Column(Float, nullable=False)
    status = Column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    submission_date = Column(DateTime, nullable=False, default=now_utc)
    review_date = Column(DateTime, nullable=True)
    reviewed_by_id = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)

    user = relationship("UserModel", back_populates="funding_requests", lazy="joined")
    invoice = relationship("InvoiceModel", lazy="joined")


__all__ = ["FundingRequestModel"]
