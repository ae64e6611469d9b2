"""Tests for the atomic KYC document upsert."""

import pytest

from factories import make_admin, make_user
from tradersbloc.application.use_cases.admins import update_kyc_document_status
from tradersbloc.application.use_cases.users import upsert_kyc_documents
from tradersbloc.domain.entities import ApprovalStatus, AuthSession
from tradersbloc.domain.errors import BadRequest, Internal
from tradersbloc.infrastructure.repositories import KYCDocumentRepository


def test_upsert_creates_one_document_per_type(session, hasher):
    user = make_user(session, hasher)

    documents = upsert_kyc_documents(
        session,
        user_id=user.id,
        documents=[
            {"document_type": "passport", "document_url": "https://files/p.pdf"},
            {
                "document_type": "utility_bill",
                "document_url": "https://files/u.pdf",
                "file_name": "u.pdf",
            },
        ],
    )

    assert {document.document_type for document in documents} == {
        "passport",
        "utility_bill",
    }
    assert all(document.status is ApprovalStatus.PENDING for document in documents)
    assert len(KYCDocumentRepository(session).list_for_user(user.id)) == 2


def test_resubmission_replaces_and_resets_review(session, hasher):
    user = make_user(session, hasher)
    admin = make_admin(session, hasher)
    (original,) = upsert_kyc_documents(
        session,
        user_id=user.id,
        documents=[{"document_type": "passport", "document_url": "https://files/v1.pdf"}],
    )
    update_kyc_document_status(
        session,
        auth_session=AuthSession(identity_id=admin.id, email=admin.email, role=admin.role),
        document_id=original.id,
        status=ApprovalStatus.REJECTED,
    )

    (replaced,) = upsert_kyc_documents(
        session,
        user_id=user.id,
        documents=[{"document_type": "passport", "document_url": "https://files/v2.pdf"}],
    )

    assert replaced.id == original.id
    assert replaced.document_url == "https://files/v2.pdf"
    assert replaced.status is ApprovalStatus.PENDING
    assert replaced.reviewed_by is None
    assert replaced.review_date is None


def test_failed_document_rolls_back_the_whole_batch(session, hasher):
    user = make_user(session, hasher)

    with pytest.raises(Internal):
        upsert_kyc_documents(
            session,
            user_id=user.id,
            documents=[
                {"document_type": "passport", "document_url": "https://files/p.pdf"},
                {"document_type": "id_card", "document_url": None},
            ],
        )

    assert KYCDocumentRepository(session).list_for_user(user.id) == []


def test_empty_batch_is_rejected(session, hasher):
    user = make_user(session, hasher)

    with pytest.raises(BadRequest):
        upsert_kyc_documents(session, user_id=user.id, documents=[])
