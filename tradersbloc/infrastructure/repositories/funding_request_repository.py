"""Persistence layer for funding requests."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ApprovalStatus, FundingRequest
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import (
    FundingRequestModel,
    InvoiceModel,
    UserModel,
)

from .pagination import apply_range, contains_any, paginate
from .user_repository import to_user_summary

FUNDING_REQUEST_SORT_COLUMNS = {
    "user": UserModel.first_name,
    "invoice": InvoiceModel.description,
    "requested_amount": FundingRequestModel.requested_amount,
    "your_contribution": FundingRequestModel.your_contribution,
    "status": FundingRequestModel.status,
    "submission_date": FundingRequestModel.submission_date,
    "review_date": FundingRequestModel.review_date,
}


class FundingRequestRepository:
    """Provide CRUD and reporting queries for :class:`FundingRequest` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, funding_request_id: int) -> FundingRequest | None:
        model = self._get_model(funding_request_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> list[FundingRequest]:
        query = (
            self.session.query(FundingRequestModel)
            .filter(FundingRequestModel.user_id == user_id)
            .filter(FundingRequestModel.deleted_at.is_(None))
            .order_by(
                FundingRequestModel.submission_date.desc(),
                FundingRequestModel.id.desc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def paginate(
        self,
        request: PageRequest,
        *,
        search: str | None = None,
        status: ApprovalStatus | None = None,
        reviewed: bool | None = None,
        submitted_from: datetime | None = None,
        submitted_to: datetime | None = None,
        amount_min: float | None = None,
        amount_max: float | None = None,
        contribution_min: float | None = None,
        contribution_max: float | None = None,
    ) -> tuple[list[FundingRequest], int]:
        query = (
            self.session.query(FundingRequestModel)
            .outerjoin(UserModel, FundingRequestModel.user_id == UserModel.id)
            .outerjoin(InvoiceModel, FundingRequestModel.invoice_id == InvoiceModel.id)
            .filter(FundingRequestModel.deleted_at.is_(None))
        )
        if search:
            query = query.filter(
                contains_any(
                    search,
                    UserModel.first_name,
                    UserModel.last_name,
                    UserModel.company_name,
                    InvoiceModel.description,
                    InvoiceModel.invoice_number,
                )
            )
        if status is not None:
            query = query.filter(
                FundingRequestModel.status == ApprovalStatus(status).value
            )
        if reviewed is True:
            query = query.filter(FundingRequestModel.review_date.is_not(None))
        elif reviewed is False:
            query = query.filter(FundingRequestModel.review_date.is_(None))
        query = apply_range(
            query, FundingRequestModel.submission_date, submitted_from, submitted_to
        )
        query = apply_range(
            query, FundingRequestModel.requested_amount, amount_min, amount_max
        )
        query = apply_range(
            query,
            FundingRequestModel.your_contribution,
            contribution_min,
            contribution_max,
        )

        models, total = paginate(
            query,
            request,
            sort_columns=FUNDING_REQUEST_SORT_COLUMNS,
            default_order=[FundingRequestModel.submission_date.desc()],
            tiebreaker=FundingRequestModel.id.desc(),
        )
        return [self._to_entity(model) for model in models], total

    def create(self, funding_request: FundingRequest) -> FundingRequest:
        model = FundingRequestModel()
        self._apply_entity_to_model(model, funding_request)
        with persistence_guard(
            self.session, failure_message="Failed to create funding request"
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, funding_request: FundingRequest) -> FundingRequest:
        model = self._get_model(funding_request.id)
        if model is None:
            msg = f"Funding request with id {funding_request.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, funding_request)
        with persistence_guard(
            self.session, failure_message="Failed to update funding request"
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def count_by_status(self, status: ApprovalStatus) -> int:
        return int(
            self.session.query(func.count(FundingRequestModel.id))
            .filter(FundingRequestModel.status == status.value)
            .filter(FundingRequestModel.deleted_at.is_(None))
            .scalar()
            or 0
        )

    def sum_requested_between(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        *,
        status: ApprovalStatus | None = None,
    ) -> float:
        query = (
            self.session.query(
                func.coalesce(func.sum(FundingRequestModel.requested_amount), 0)
            )
            .filter(FundingRequestModel.deleted_at.is_(None))
        )
        if start is not None:
            query = query.filter(FundingRequestModel.submission_date >= start)
        if end is not None:
            query = query.filter(FundingRequestModel.submission_date < end)
        if status is not None:
            query = query.filter(FundingRequestModel.status == status.value)
        return float(query.scalar() or 0)

    def _get_model(self, funding_request_id: int | None) -> FundingRequestModel | None:
        return (
            self.session.query(FundingRequestModel)
            .filter(FundingRequestModel.id == funding_request_id)
            .filter(FundingRequestModel.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: FundingRequestModel, funding_request: FundingRequest
    ) -> None:
        model.user_id = funding_request.user_id
        model.invoice_id = funding_request.invoice_id
        model.requested_amount = funding_request.requested_amount
        model.your_contribution = funding_request.your_contribution
        model.status = ApprovalStatus(funding_request.status).value
        if funding_request.submission_date is not None:
            model.submission_date = funding_request.submission_date
        model.review_date = funding_request.review_date
        model.reviewed_by_id = funding_request.reviewed_by
        model.updated_at = funding_request.updated_at
        model.deleted_at = funding_request.deleted_at

    @staticmethod
    def _to_entity(model: FundingRequestModel) -> FundingRequest:
        return FundingRequest(
            id=model.id,
            user_id=model.user_id,
            invoice_id=model.invoice_id,
            requested_amount=model.requested_amount,
            your_contribution=model.your_contribution,
            status=ApprovalStatus(model.status),
            submission_date=model.submission_date,
            review_date=model.review_date,
            reviewed_by=model.reviewed_by_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
            owner=to_user_summary(model.user),
            invoice_description=model.invoice.description if model.invoice else None,
        )


__all__ = ["FUNDING_REQUEST_SORT_COLUMNS", "FundingRequestRepository"]
