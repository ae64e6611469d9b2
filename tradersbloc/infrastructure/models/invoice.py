"""SQLAlchemy model for invoices submitted for financing."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tradersbloc.domain.entities import ApprovalStatus
from tradersbloc.infrastructure.database import Base
from tradersbloc.utils import now_utc


class InvoiceModel(Base):
    __tablename__ = "invoice"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    vendor_id = Column(Integer, ForeignKey("vendor.id"), nullable=False, index=True)
    invoice_number = Column(String(60), nullable=False)
    description = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    price_per_unit = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    invoice_file = Column(String(500), nullable=True)
    payment_terms = Column(String(120), nullable=False)
    due_date = Column(DateTime, nullable=False)
    status = Column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    submission_date = Column(DateTime, nullable=False, default=now_utc)
    review_date = Column(DateTime, nullable=True)
    admin_id = Column(
        Integer, ForeignKey("admin.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)
    deleted_at = Column(DateTime, nullable=True)

    user = relationship("UserModel", back_populates="invoices", lazy="joined")
    vendor = relationship("VendorModel", lazy="joined")
    milestones = relationship(
        "MilestoneModel", back_populates="invoice", order_by="MilestoneModel.id"
    )


__all__ = ["InvoiceModel"]
