"""Use case returning a customer together with everything they submitted."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import (
    FundingRequest,
    Invoice,
    KYCDocument,
    Milestone,
    Notification,
    User,
)
from tradersbloc.domain.errors import NotFound
from tradersbloc.infrastructure.repositories import (
    FundingRequestRepository,
    InvoiceRepository,
    KYCDocumentRepository,
    MilestoneRepository,
    NotificationRepository,
    UserRepository,
)


@dataclass
class UserData:
    user: User
    invoices: list[Invoice] = field(default_factory=list)
    funding_requests: list[FundingRequest] = field(default_factory=list)
    milestones: list[Milestone] = field(default_factory=list)
    kyc_documents: list[KYCDocument] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)


def get_user_data(session: Session, *, user_id: int) -> UserData:
    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFound("User not found")

    return UserData(
        user=user,
        invoices=list(
            InvoiceRepository(session).list_for_user(user_id, include_milestones=True)
        ),
        funding_requests=FundingRequestRepository(session).list_for_user(user_id),
        milestones=MilestoneRepository(session).list_for_user(user_id),
        kyc_documents=KYCDocumentRepository(session).list_for_user(user_id),
        notifications=NotificationRepository(session).list_for_user(user_id),
    )


__all__ = ["UserData", "get_user_data"]
