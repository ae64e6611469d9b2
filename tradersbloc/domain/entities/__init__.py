"""Domain entities exposed by the application."""

from .financing import (
    ApprovalStatus,
    FundingRequest,
    Invoice,
    KYCDocument,
    Milestone,
    Vendor,
)
from .notification import (
    ActivityLog,
    DeliveryClass,
    Notification,
    NotificationType,
    classify_notification_type,
)
from .principal import Admin, AppUser, User, UserSummary
from .role import STAFF_ROLES, AdminStatus, Role
from .session import AuthSession

__all__ = [
    "ActivityLog",
    "Admin",
    "AdminStatus",
    "AppUser",
    "ApprovalStatus",
    "AuthSession",
    "DeliveryClass",
    "FundingRequest",
    "Invoice",
    "KYCDocument",
    "Milestone",
    "Notification",
    "NotificationType",
    "Role",
    "STAFF_ROLES",
    "User",
    "UserSummary",
    "Vendor",
    "classify_notification_type",
]
