"""Schemas for end customers and app users."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .records import (
    FundingRequestRead,
    InvoiceRead,
    KYCDocumentRead,
    MilestoneRead,
    NotificationRead,
)


class UserRegister(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=80)
    last_name: str = Field(..., min_length=1, max_length=80)
    phone_number: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    password: str = Field(..., min_length=8)
    company_name: str = Field(..., min_length=1, max_length=120)
    tax_id: str = Field(..., min_length=1, max_length=50)
    industry: str = Field(..., min_length=1, max_length=80)


class UserUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=80)
    last_name: str | None = Field(default=None, min_length=1, max_length=80)
    phone_number: str | None = Field(default=None, min_length=1, max_length=30)
    email: EmailStr | None = None
    company_name: str | None = Field(default=None, min_length=1, max_length=120)
    tax_id: str | None = Field(default=None, min_length=1, max_length=50)
    industry: str | None = Field(default=None, min_length=1, max_length=80)
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=8)

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str
    email: str
    company_name: str
    tax_id: str
    industry: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UserDataRead(BaseModel):
    user: UserRead
    invoices: list[InvoiceRead]
    funding_requests: list[FundingRequestRead]
    milestones: list[MilestoneRead]
    kyc_documents: list[KYCDocumentRead]
    notifications: list[NotificationRead]

    model_config = ConfigDict(from_attributes=True)


class KYCDocumentInput(BaseModel):
    document_type: str = Field(..., min_length=1, max_length=60)
    document_url: str = Field(..., min_length=1, max_length=500)
    file_name: str | None = Field(default=None, max_length=255)


class KYCDocumentsUpsert(BaseModel):
    documents: list[KYCDocumentInput] = Field(..., min_length=1)


class InvoiceCreate(BaseModel):
    vendor_id: int = Field(..., ge=1)
    invoice_number: str = Field(..., min_length=1, max_length=60)
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    price_per_unit: float = Field(..., ge=0)
    total_price: float = Field(..., ge=0)
    payment_terms: str = Field(..., min_length=1, max_length=120)
    due_date: datetime
    invoice_file: str | None = Field(default=None, max_length=500)


class InvoiceUpdate(BaseModel):
    vendor_id: int | None = Field(default=None, ge=1)
    invoice_number: str | None = Field(default=None, min_length=1, max_length=60)
    description: str | None = Field(default=None, min_length=1)
    quantity: int | None = Field(default=None, ge=1)
    price_per_unit: float | None = Field(default=None, ge=0)
    total_price: float | None = Field(default=None, ge=0)
    payment_terms: str | None = Field(default=None, min_length=1, max_length=120)
    due_date: datetime | None = None
    invoice_file: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(extra="forbid")


class MilestoneCreate(BaseModel):
    invoice_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=120)
    description: str = Field(..., min_length=1)
    supporting_doc: str | None = Field(default=None, max_length=500)
    bank_account_no: str = Field(..., min_length=1, max_length=60)
    bank_name: str = Field(..., min_length=1, max_length=120)
    payment_amount: float = Field(..., gt=0)
    due_date: datetime


class MilestoneUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = Field(default=None, min_length=1)
    supporting_doc: str | None = Field(default=None, max_length=500)
    bank_account_no: str | None = Field(default=None, min_length=1, max_length=60)
    bank_name: str | None = Field(default=None, min_length=1, max_length=120)
    payment_amount: float | None = Field(default=None, gt=0)
    due_date: datetime | None = None

    model_config = ConfigDict(extra="forbid")


class FundingRequestCreate(BaseModel):
    invoice_id: int = Field(..., ge=1)
    requested_amount: float = Field(..., gt=0)
    your_contribution: float = Field(..., ge=0)


class AppUserRegister(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=80)
    last_name: str = Field(..., min_length=1, max_length=80)
    phone_number: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    password: str = Field(..., min_length=8)
    profile_picture: str | None = Field(
        default=None, max_length=500, description="URL of an already hosted picture"
    )
    date_of_birth: date | None = None


class AppUserRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str
    email: str
    profile_picture: str | None
    date_of_birth: date | None

    model_config = ConfigDict(from_attributes=True)


class AppUserRegistrationResponse(BaseModel):
    success: bool
    user: AppUserRead
