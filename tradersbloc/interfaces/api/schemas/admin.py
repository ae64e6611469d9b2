"""Schemas for staff accounts, the dashboard and reports."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tradersbloc.domain.entities import AdminStatus, Role

from .records import ActivityLogRead, NotificationRead


class AdminRead(BaseModel):
    id: int
    name: str
    email: str
    role: Role
    status: AdminStatus
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class AdminDataRead(BaseModel):
    admin: AdminRead
    notifications: list[NotificationRead]

    model_config = ConfigDict(from_attributes=True)


class AdminProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2, max_length=120)
    email: EmailStr | None = None
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=8)

    model_config = ConfigDict(extra="forbid")


class AdminCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: Role = Role.ADMIN


class AdminUpdate(BaseModel):
    status: AdminStatus
    role: Role | None = None


class AdminPermissionsUpdate(BaseModel):
    role: Role


class DashboardSummaryRead(BaseModel):
    admin: AdminRead
    pending_invoices: int
    pending_fund_requests: int
    pending_milestones: int
    total_funded: float
    recent_activity: list[ActivityLogRead]
    unread_notifications: list[NotificationRead]

    model_config = ConfigDict(from_attributes=True)


class InvoiceTrendRead(BaseModel):
    date: str
    amount: float
    count: int

    model_config = ConfigDict(from_attributes=True)


class StatusCountRead(BaseModel):
    name: str
    value: int

    model_config = ConfigDict(from_attributes=True)


class MilestoneProgressRead(BaseModel):
    name: str
    completed: int
    pending: int

    model_config = ConfigDict(from_attributes=True)


class UserActivityRead(BaseModel):
    date: str
    new_users: int

    model_config = ConfigDict(from_attributes=True)


class ReportRead(BaseModel):
    total_invoices: int
    invoice_growth: float
    active_users: int
    user_growth: float
    total_milestones: int
    milestone_growth: float
    total_amount: float
    amount_growth: float
    invoice_trends: list[InvoiceTrendRead]
    status_distribution: list[StatusCountRead]
    milestone_progress: list[MilestoneProgressRead]
    user_activity: list[UserActivityRead]

    model_config = ConfigDict(from_attributes=True)
