"""Domain entities for the records exchanged during invoice financing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .principal import UserSummary


class ApprovalStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    NOT_SUBMITTED = "NOT_SUBMITTED"


@dataclass
class Vendor:
    id: int | None
    name: str
    contact_person: str
    contact_person_phone_number: str
    phone_number: str
    address: str
    email: str
    bank_name: str
    bank_account_number: str
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass
class Milestone:
    id: int | None
    user_id: int
    invoice_id: int
    title: str
    description: str
    supporting_doc: str | None
    bank_account_no: str
    bank_name: str
    payment_amount: float
    due_date: datetime
    status: ApprovalStatus = ApprovalStatus.PENDING
    paid_at: datetime | None = None
    reviewed_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    owner: UserSummary | None = None
    invoice_number: str | None = None


@dataclass
class Invoice:
    id: int | None
    user_id: int
    vendor_id: int
    invoice_number: str
    description: str
    quantity: int
    price_per_unit: float
    total_price: float
    invoice_file: str | None
    payment_terms: str
    due_date: datetime
    status: ApprovalStatus = ApprovalStatus.PENDING
    submission_date: datetime | None = None
    review_date: datetime | None = None
    reviewed_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    owner: UserSummary | None = None
    vendor_name: str | None = None
    milestones: list[Milestone] = field(default_factory=list)


@dataclass
class FundingRequest:
    id: int | None
    user_id: int
    invoice_id: int
    requested_amount: float
    your_contribution: float
    status: ApprovalStatus = ApprovalStatus.PENDING
    submission_date: datetime | None = None
    review_date: datetime | None = None
    reviewed_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    owner: UserSummary | None = None
    invoice_description: str | None = None


@dataclass
class KYCDocument:
    """Identity document, unique per ``(user_id, document_type)``."""

    id: int | None
    user_id: int
    document_type: str
    document_url: str
    file_name: str | None = None
    status: ApprovalStatus = ApprovalStatus.PENDING
    submission_date: datetime | None = None
    review_date: datetime | None = None
    reviewed_by: int | None = None
    owner: UserSummary | None = None


__all__ = [
    "ApprovalStatus",
    "FundingRequest",
    "Invoice",
    "KYCDocument",
    "Milestone",
    "Vendor",
]
