"""Use cases for notifications and the staff activity log."""

from .dispatcher import create_notification, log_admin_activity
from .update_notification import mark_admin_notification_as_read, update_user_notification

__all__ = [
    "create_notification",
    "log_admin_activity",
    "mark_admin_notification_as_read",
    "update_user_notification",
]
