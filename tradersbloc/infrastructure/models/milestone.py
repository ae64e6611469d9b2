"""SQLAlchemy model for invoice payment milestones."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class MilestoneModel(Base):
    __tablename__ = "milestone"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    invoice_id = Column(Integer, ForeignKey("invoice.id"), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    description = Column(Text, nullable=False)
    supporting_doc = Column(String(500), nullable=True)
    bank_account_no = Column(String(60), nullable=False)
    bank_name = Column(String(120), nullable=False)
    payment_amount = Column(Float, nullable=False)
    due_date = Column(DateTime, nullable=False)
    status = Column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    paid_at = Column(DateTime, nullable=True)
    reviewed_by_id = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)

    user = relationship("UserModel", back_populates="milestones", lazy="joined")
    invoice = relationship("InvoiceModel", back_populates="milestones", lazy="joined")


__all__ = ["MilestoneModel"]
