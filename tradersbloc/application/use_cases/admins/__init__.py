"""Use cases available to admins."""

from .dashboard import DashboardSummary, get_dashboard_summary
from .funding_requests import (
    get_funding_request,
    list_funding_requests,
    update_funding_request_status,
)
from .invoices import get_invoice, list_invoices, update_invoice_status
from .kyc_documents import get_kyc_document, list_kyc_documents, update_kyc_document_status
from .milestones import get_milestone, list_milestones, update_milestone_status
from .profile import AdminData, get_admin_data, get_admin_profile, update_admin_data
from .reports import ReportData, calculate_growth, get_report_data
from .vendors import create_vendor, list_vendors, update_vendor

__all__ = [
    "AdminData",
    "DashboardSummary",
    "ReportData",
    "calculate_growth",
    "create_vendor",
    "get_admin_data",
    "get_admin_profile",
    "get_dashboard_summary",
    "get_funding_request",
    "get_invoice",
    "get_kyc_document",
    "get_milestone",
    "get_report_data",
    "list_funding_requests",
    "list_invoices",
    "list_kyc_documents",
    "list_milestones",
    "list_vendors",
    "update_admin_data",
    "update_funding_request_status",
    "update_invoice_status",
    "update_kyc_document_status",
    "update_milestone_status",
    "update_vendor",
]
