"""Use cases available to end customers."""

from .funding_requests import create_funding_request
from .get_user_data import UserData, get_user_data
from .invoices import create_invoice, delete_invoice, list_user_invoices, update_invoice
from .kyc_documents import upsert_kyc_documents
from .milestones import create_milestone, delete_milestone, update_milestone
from .register_user import register_user
from .update_user import update_user
from .vendors import list_active_vendors

__all__ = [
    "UserData",
    "create_funding_request",
    "create_invoice",
    "create_milestone",
    "delete_invoice",
    "delete_milestone",
    "get_user_data",
    "list_active_vendors",
    "list_user_invoices",
    "register_user",
    "update_invoice",
    "update_milestone",
    "update_user",
    "upsert_kyc_documents",
]
