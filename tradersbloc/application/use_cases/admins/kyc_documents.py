"""Use cases for reviewing KYC documents."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.notifications import create_notification
from tradersbloc.domain.entities import (
    ApprovalStatus,
    AuthSession,
    KYCDocument,
    NotificationType,
)
from tradersbloc.domain.errors import NotFound
from tradersbloc.domain.pagination import Page, PageRequest, build_page
from tradersbloc.infrastructure.repositories import KYCDocumentRepository
from tradersbloc.utils import ensure_naive_utc, now_utc

from .filters import parse_status


def list_kyc_documents(
    session: Session,
    request: PageRequest,
    *,
    search: str | None = None,
    status: str | None = None,
    document_type: str | None = None,
    submitted_from: datetime | None = None,
    submitted_to: datetime | None = None,
) -> Page[KYCDocument]:
    items, total = KYCDocumentRepository(session).paginate(
        request,
        search=search,
        status=parse_status(status),
        document_type=document_type,
        submitted_from=ensure_naive_utc(submitted_from),
        submitted_to=ensure_naive_utc(submitted_to),
    )
    return build_page(items, total=total, request=request)


def get_kyc_document(session: Session, *, document_id: int) -> KYCDocument:
    document = KYCDocumentRepository(session).get(document_id)
    if document is None:
        raise NotFound("KYC document not found")
    return document


def update_kyc_document_status(
    session: Session,
    *,
    auth_session: AuthSession,
    document_id: int,
    status: ApprovalStatus,
) -> KYCDocument:
    repository = KYCDocumentRepository(session)
    document = get_kyc_document(session, document_id=document_id)
    status = ApprovalStatus(status)
    saved = repository.update(
        replace(
            document,
            status=status,
            review_date=now_utc(),
            reviewed_by=auth_session.identity_id,
        )
    )

    create_notification(
        session,
        message=f"KYC document has been {status.value}",
        kind=NotificationType.KYC_STATUS_UPDATE,
        link=f"/kyc/{saved.id}",
        user_id=saved.user_id,
        acting_session=auth_session,
    )
    return saved


__all__ = ["get_kyc_document", "list_kyc_documents", "update_kyc_document_status"]
