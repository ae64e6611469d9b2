"""ORM models used by the application infrastructure."""

from .admin import AdminModel
from .app_user import AppUserModel
from .funding_request import FundingRequestModel
from .invoice import InvoiceModel
from .kyc_document import KYCDocumentModel
from .milestone import MilestoneModel
from .notification import ActivityLogModel, NotificationModel, notification_admin_table
from .user import UserModel
from .vendor import VendorModel

__all__ = [
    "ActivityLogModel",
    "AdminModel",
    "AppUserModel",
    "FundingRequestModel",
    "InvoiceModel",
    "KYCDocumentModel",
    "MilestoneModel",
    "NotificationModel",
    "UserModel",
    "VendorModel",
    "notification_admin_table",
]
