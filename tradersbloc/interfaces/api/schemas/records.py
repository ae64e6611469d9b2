"""Read models for the financing records exchanged with customers and staff."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tradersbloc.domain.entities import ApprovalStatus, NotificationType


class UserSummaryRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    company_name: str

    model_config = ConfigDict(from_attributes=True)


class VendorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    contact_person: str = Field(..., min_length=1, max_length=120)
    contact_person_phone_number: str = Field(..., min_length=1, max_length=30)
    phone_number: str = Field(..., min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    bank_name: str = Field(..., min_length=1, max_length=120)
    bank_account_number: str = Field(..., min_length=1, max_length=60)


class VendorCreate(VendorBase):
    pass


class VendorUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    contact_person: str | None = Field(default=None, min_length=1, max_length=120)
    contact_person_phone_number: str | None = Field(
        default=None, min_length=1, max_length=30
    )
    phone_number: str | None = Field(default=None, min_length=1, max_length=30)
    address: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    bank_name: str | None = Field(default=None, min_length=1, max_length=120)
    bank_account_number: str | None = Field(default=None, min_length=1, max_length=60)

    model_config = ConfigDict(extra="forbid")


class VendorRead(BaseModel):
    id: int
    name: str
    contact_person: str
    contact_person_phone_number: str
    phone_number: str
    address: str
    email: str
    bank_name: str
    bank_account_number: str
    created_by: int | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class MilestoneRead(BaseModel):
    id: int
    user_id: int
    invoice_id: int
    title: str
    description: str
    supporting_doc: str | None
    bank_account_no: str
    bank_name: str
    payment_amount: float
    due_date: datetime
    status: ApprovalStatus
    paid_at: datetime | None
    reviewed_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    owner: UserSummaryRead | None = None
    invoice_number: str | None = None

    model_config = ConfigDict(from_attributes=True)


class InvoiceRead(BaseModel):
    id: int
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
    status: ApprovalStatus
    submission_date: datetime | None
    review_date: datetime | None
    reviewed_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    owner: UserSummaryRead | None = None
    vendor_name: str | None = None
    milestones: list[MilestoneRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class FundingRequestRead(BaseModel):
    id: int
    user_id: int
    invoice_id: int
    requested_amount: float
    your_contribution: float
    status: ApprovalStatus
    submission_date: datetime | None
    review_date: datetime | None
    reviewed_by: int | None
    owner: UserSummaryRead | None = None
    invoice_description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class KYCDocumentRead(BaseModel):
    id: int
    user_id: int
    document_type: str
    document_url: str
    file_name: str | None
    status: ApprovalStatus
    submission_date: datetime | None
    review_date: datetime | None
    reviewed_by: int | None
    owner: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationRead(BaseModel):
    id: int
    message: str
    type: NotificationType
    link: str
    is_read: bool
    user_id: int | None
    admin_ids: list[int] = Field(default_factory=list)
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ActivityLogRead(BaseModel):
    id: int
    admin_id: int | None
    action: str
    type: NotificationType
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class StatusUpdate(BaseModel):
    status: ApprovalStatus


class NotificationReadUpdate(BaseModel):
    is_read: bool
