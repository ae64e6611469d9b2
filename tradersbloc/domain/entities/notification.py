"""Domain entities and taxonomy for notifications and activity logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Closed set of reasons a notification or activity entry is created."""

    FUNDING_UPDATE = "FUNDING_UPDATE"
    FUNDING_STATUS_UPDATE = "FUNDING_STATUS_UPDATE"
    INVOICE_UPDATE = "INVOICE_UPDATE"
    INVOICE_STATUS_UPDATE = "INVOICE_STATUS_UPDATE"
    MILESTONE_UPDATE = "MILESTONE_UPDATE"
    MILESTONE_STATUS_UPDATE = "MILESTONE_STATUS_UPDATE"
    KYC_STATUS_UPDATE = "KYC_STATUS_UPDATE"
    SYSTEM_ALERT = "SYSTEM_ALERT"


class DeliveryClass(str, Enum):
    """How the dispatcher resolves recipients for an event kind."""

    BROADCAST = "BROADCAST"
    TARGETED = "TARGETED"
    UNHANDLED = "UNHANDLED"


BROADCAST_TYPES = frozenset(
    {
        NotificationType.FUNDING_UPDATE,
        NotificationType.INVOICE_UPDATE,
        NotificationType.MILESTONE_UPDATE,
    }
)
TARGETED_TYPES = frozenset(
    {
        NotificationType.FUNDING_STATUS_UPDATE,
        NotificationType.INVOICE_STATUS_UPDATE,
        NotificationType.MILESTONE_STATUS_UPDATE,
        NotificationType.KYC_STATUS_UPDATE,
    }
)


def classify_notification_type(kind: NotificationType | str) -> DeliveryClass:
    """Return the delivery class for ``kind``.

    Values outside the known enumeration, as well as ``SYSTEM_ALERT``, are
    ``UNHANDLED``.
    """

    try:
        normalized = NotificationType(kind)
    except ValueError:
        return DeliveryClass.UNHANDLED
    if normalized in BROADCAST_TYPES:
        return DeliveryClass.BROADCAST
    if normalized in TARGETED_TYPES:
        return DeliveryClass.TARGETED
    return DeliveryClass.UNHANDLED


@dataclass
class Notification:
    """Message addressed either to every admin or to a single end user."""

    id: int | None
    message: str
    type: NotificationType
    link: str
    admin_ids: set[int] = field(default_factory=set)
    user_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass
class ActivityLog:
    """Append-only record of an action performed by a staff member."""

    id: int | None
    admin_id: int | None
    action: str
    type: NotificationType
    created_at: datetime | None = None


__all__ = [
    "ActivityLog",
    "BROADCAST_TYPES",
    "DeliveryClass",
    "Notification",
    "NotificationType",
    "TARGETED_TYPES",
    "classify_notification_type",
]
