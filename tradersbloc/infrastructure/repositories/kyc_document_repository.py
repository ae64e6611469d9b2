"""Persistence layer for KYC documents."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ApprovalStatus, KYCDocument
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import KYCDocumentModel, UserModel
from tradersbloc.utils import now_utc

from .pagination import apply_range, contains_any, paginate
from .user_repository import to_user_summary

KYC_DOCUMENT_SORT_COLUMNS = {
    "company": UserModel.company_name,
    "document_type": KYCDocumentModel.document_type,
    "status": KYCDocumentModel.status,
    "submission_date": KYCDocumentModel.submission_date,
    "review_date": KYCDocumentModel.review_date,
}


class KYCDocumentRepository:
    """Provide CRUD operations for :class:`KYCDocument` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, document_id: int) -> KYCDocument | None:
        model = self.session.get(KYCDocumentModel, document_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> list[KYCDocument]:
        query = (
            self.session.query(KYCDocumentModel)
            .filter(KYCDocumentModel.user_id == user_id)
            .order_by(KYCDocumentModel.document_type.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def upsert_many(
        self, user_id: int, documents: Iterable[KYCDocument]
    ) -> list[KYCDocument]:
        """Insert or replace the user's documents keyed by document type.

        Every written document is reset to ``PENDING``. The batch is committed
        once; a failure on any document rolls back the whole batch.
        """

        submitted_at = now_utc()
        models: list[KYCDocumentModel] = []
        with persistence_guard(
            self.session, failure_message="Failed to upsert KYC documents"
        ):
            for document in documents:
                model = (
                    self.session.query(KYCDocumentModel)
                    .filter(KYCDocumentModel.user_id == user_id)
                    .filter(KYCDocumentModel.document_type == document.document_type)
                    .first()
                )
                if model is None:
                    model = KYCDocumentModel(
                        user_id=user_id, document_type=document.document_type
                    )
                    self.session.add(model)
                model.document_url = document.document_url
                model.file_name = document.file_name
                model.status = ApprovalStatus.PENDING.value
                model.submission_date = submitted_at
                model.review_date = None
                model.reviewed_by_id = None
                self.session.flush()
                models.append(model)
            self.session.commit()
            for model in models:
                self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def update(self, document: KYCDocument) -> KYCDocument:
        model = self.session.get(KYCDocumentModel, document.id)
        if model is None:
            msg = f"KYC document with id {document.id} not found"
            raise ValueError(msg)
        model.document_url = document.document_url
        model.file_name = document.file_name
        model.status = ApprovalStatus(document.status).value
        model.review_date = document.review_date
        model.reviewed_by_id = document.reviewed_by
        with persistence_guard(
            self.session, failure_message="Failed to update KYC document"
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def paginate(
        self,
        request: PageRequest,
        *,
        search: str | None = None,
        status: ApprovalStatus | None = None,
        document_type: str | None = None,
        submitted_from: datetime | None = None,
        submitted_to: datetime | None = None,
    ) -> tuple[list[KYCDocument], int]:
        query = self.session.query(KYCDocumentModel).outerjoin(
            UserModel, KYCDocumentModel.user_id == UserModel.id
        )
        if search:
            query = query.filter(
                contains_any(
                    search,
                    UserModel.company_name,
                    UserModel.first_name,
                    UserModel.last_name,
                    KYCDocumentModel.document_type,
                    KYCDocumentModel.file_name,
                )
            )
        if status is not None:
            query = query.filter(KYCDocumentModel.status == ApprovalStatus(status).value)
        if document_type:
            query = query.filter(KYCDocumentModel.document_type == document_type)
        query = apply_range(
            query, KYCDocumentModel.submission_date, submitted_from, submitted_to
        )

        models, total = paginate(
            query,
            request,
            sort_columns=KYC_DOCUMENT_SORT_COLUMNS,
            default_order=[KYCDocumentModel.submission_date.desc()],
            tiebreaker=KYCDocumentModel.id.desc(),
        )
        return [self._to_entity(model) for model in models], total

    @staticmethod
    def _to_entity(model: KYCDocumentModel) -> KYCDocument:
        return KYCDocument(
            id=model.id,
            user_id=model.user_id,
            document_type=model.document_type,
            document_url=model.document_url,
            file_name=model.file_name,
            status=ApprovalStatus(model.status),
            submission_date=model.submission_date,
            review_date=model.review_date,
            reviewed_by=model.reviewed_by_id,
            owner=to_user_summary(model.user),
        )


__all__ = ["KYC_DOCUMENT_SORT_COLUMNS", "KYCDocumentRepository"]
