"""Use case for submitting KYC documents."""

from collections.abc import Iterable, Mapping

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import KYCDocument
from tradersbloc.domain.errors import BadRequest
from tradersbloc.infrastructure.repositories import KYCDocumentRepository


def upsert_kyc_documents(
    session: Session, *, user_id: int, documents: Iterable[Mapping[str, str | None]]
) -> list[KYCDocument]:
    """Insert or replace the caller's documents as one atomic batch.

    Each mapping carries ``document_type``, ``document_url`` and an optional
    ``file_name``. Every stored document goes back to ``PENDING`` review.
    """

    batch = [
        KYCDocument(
            id=None,
            user_id=user_id,
            document_type=document["document_type"],
            document_url=document["document_url"],
            file_name=document.get("file_name"),
        )
        for document in documents
    ]
    if not batch:
        raise BadRequest("At least one document is required")
    return KYCDocumentRepository(session).upsert_many(user_id, batch)


__all__ = ["upsert_kyc_documents"]
