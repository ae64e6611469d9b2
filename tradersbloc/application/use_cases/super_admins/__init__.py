"""Use cases available to super-admins."""

from .manage_admins import create_admin, delete_admin, update_admin, update_admin_permissions

__all__ = ["create_admin", "delete_admin", "update_admin", "update_admin_permissions"]
