from .admin import (
    AdminCreate,
    AdminDataRead,
    AdminPermissionsUpdate,
    AdminProfileUpdate,
    AdminRead,
    AdminUpdate,
    DashboardSummaryRead,
    ReportRead,
)
from .auth import MessageResponse, Token
from .common import PageMetadataRead, PageRead
from .records import (
    ActivityLogRead,
    FundingRequestRead,
    InvoiceRead,
    KYCDocumentRead,
    MilestoneRead,
    NotificationRead,
    NotificationReadUpdate,
    StatusUpdate,
    UserSummaryRead,
    VendorCreate,
    VendorRead,
    VendorUpdate,
)
from .user import (
    AppUserRead,
    AppUserRegister,
    AppUserRegistrationResponse,
    FundingRequestCreate,
    InvoiceCreate,
    InvoiceUpdate,
    KYCDocumentsUpsert,
    MilestoneCreate,
    MilestoneUpdate,
    UserDataRead,
    UserRead,
    UserRegister,
    UserUpdate,
)

__all__ = [
    "ActivityLogRead",
    "AdminCreate",
    "AdminDataRead",
    "AdminPermissionsUpdate",
    "AdminProfileUpdate",
    "AdminRead",
    "AdminUpdate",
    "AppUserRead",
    "AppUserRegister",
    "AppUserRegistrationResponse",
    "DashboardSummaryRead",
    "FundingRequestCreate",
    "FundingRequestRead",
    "InvoiceCreate",
    "InvoiceRead",
    "InvoiceUpdate",
    "KYCDocumentRead",
    "KYCDocumentsUpsert",
    "MessageResponse",
    "MilestoneCreate",
    "MilestoneRead",
    "MilestoneUpdate",
    "NotificationRead",
    "NotificationReadUpdate",
    "PageMetadataRead",
    "PageRead",
    "ReportRead",
    "StatusUpdate",
    "Token",
    "UserDataRead",
    "UserRead",
    "UserRegister",
    "UserSummaryRead",
    "UserUpdate",
    "VendorCreate",
    "VendorRead",
    "VendorUpdate",
]
