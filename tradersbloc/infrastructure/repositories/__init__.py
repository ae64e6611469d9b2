"""Repository implementations."""

from .activity_log_repository import ActivityLogRepository
from .admin_repository import AdminRepository
from .app_user_repository import AppUserRepository
from .funding_request_repository import FundingRequestRepository
from .invoice_repository import InvoiceRepository
from .kyc_document_repository import KYCDocumentRepository
from .milestone_repository import MilestoneRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository
from .vendor_repository import VendorRepository

__all__ = [
    "ActivityLogRepository",
    "AdminRepository",
    "AppUserRepository",
    "FundingRequestRepository",
    "InvoiceRepository",
    "KYCDocumentRepository",
    "MilestoneRepository",
    "NotificationRepository",
    "UserRepository",
    "VendorRepository",
]
