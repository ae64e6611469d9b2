"""Persistence layer for invoice milestones."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradersbloc.domain.entities import ApprovalStatus, Milestone
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import InvoiceModel, MilestoneModel, UserModel

from .pagination import apply_range, contains_any, paginate
from .user_repository import to_user_summary

MILESTONE_SORT_COLUMNS = {
    "user": UserModel.first_name,
    "invoice": InvoiceModel.invoice_number,
    "title": MilestoneModel.title,
    "payment_amount": MilestoneModel.payment_amount,
    "due_date": MilestoneModel.due_date,
    "status": MilestoneModel.status,
    "bank_name": MilestoneModel.bank_name,
    "created_at": MilestoneModel.created_at,
}


class MilestoneRepository:
    """Provide CRUD operations for :class:`Milestone` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, milestone_id: int) -> Milestone | None:
        model = self._get_model(milestone_id)
        return self.to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> list[Milestone]:
        query = (
            self.session.query(MilestoneModel)
            .filter(MilestoneModel.user_id == user_id)
            .filter(MilestoneModel.deleted_at.is_(None))
            .order_by(MilestoneModel.created_at.desc(), MilestoneModel.id.desc())
        )
        return [self.to_entity(model) for model in query.all()]

    def paginate(
        self,
        request: PageRequest,
        *,
        search: str | None = None,
        status: ApprovalStatus | None = None,
        paid: bool | None = None,
        due_from: datetime | None = None,
        due_to: datetime | None = None,
        due_before: datetime | None = None,
        amount_min: float | None = None,
        amount_max: float | None = None,
    ) -> tuple[list[Milestone], int]:
        query = (
            self.session.query(MilestoneModel)
            .outerjoin(UserModel, MilestoneModel.user_id == UserModel.id)
            .outerjoin(InvoiceModel, MilestoneModel.invoice_id == InvoiceModel.id)
            .filter(MilestoneModel.deleted_at.is_(None))
        )
        if search:
            query = query.filter(
                contains_any(
                    search,
                    MilestoneModel.title,
                    MilestoneModel.description,
                    MilestoneModel.bank_name,
                    UserModel.first_name,
                    UserModel.last_name,
                    InvoiceModel.invoice_number,
                )
            )
        if status is not None:
            query = query.filter(MilestoneModel.status == ApprovalStatus(status).value)
        if paid is True:
            query = query.filter(MilestoneModel.paid_at.is_not(None))
        elif paid is False:
            query = query.filter(MilestoneModel.paid_at.is_(None))
        query = apply_range(query, MilestoneModel.due_date, due_from, due_to)
        if due_before is not None:
            query = query.filter(MilestoneModel.due_date < due_before)
        query = apply_range(
            query, MilestoneModel.payment_amount, amount_min, amount_max
        )

        models, total = paginate(
            query,
            request,
            sort_columns=MILESTONE_SORT_COLUMNS,
            default_order=[MilestoneModel.created_at.desc()],
            tiebreaker=MilestoneModel.id.desc(),
        )
        return [self.to_entity(model) for model in models], total

    def create(self, milestone: Milestone) -> Milestone:
        model = MilestoneModel()
        self._apply_entity_to_model(model, milestone)
        with persistence_guard(self.session, failure_message="Failed to create milestone"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.to_entity(model)

    def update(self, milestone: Milestone) -> Milestone:
        model = self._get_model(milestone.id)
        if model is None:
            msg = f"Milestone with id {milestone.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, milestone)
        with persistence_guard(self.session, failure_message="Failed to update milestone"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.to_entity(model)

    def count_by_status(self, status: ApprovalStatus) -> int:
        return int(
            self.session.query(func.count(MilestoneModel.id))
            .filter(MilestoneModel.status == status.value)
            .filter(MilestoneModel.deleted_at.is_(None))
            .scalar()
            or 0
        )

    def count_created_between(
        self, start: datetime, end: datetime | None = None
    ) -> int:
        query = (
            self.session.query(func.count(MilestoneModel.id))
            .filter(MilestoneModel.created_at >= start)
            .filter(MilestoneModel.deleted_at.is_(None))
        )
        if end is not None:
            query = query.filter(MilestoneModel.created_at < end)
        return int(query.scalar() or 0)

    def status_counts(self) -> dict[str, int]:
        rows = (
            self.session.query(MilestoneModel.status, func.count(MilestoneModel.id))
            .filter(MilestoneModel.deleted_at.is_(None))
            .group_by(MilestoneModel.status)
            .all()
        )
        return {status: int(count) for status, count in rows}

    def _get_model(self, milestone_id: int | None) -> MilestoneModel | None:
        return (
            self.session.query(MilestoneModel)
            .filter(MilestoneModel.id == milestone_id)
            .filter(MilestoneModel.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: MilestoneModel, milestone: Milestone) -> None:
        model.user_id = milestone.user_id
        model.invoice_id = milestone.invoice_id
        model.title = milestone.title
        model.description = milestone.description
        model.supporting_doc = milestone.supporting_doc
        model.bank_account_no = milestone.bank_account_no
        model.bank_name = milestone.bank_name
        model.payment_amount = milestone.payment_amount
        model.due_date = milestone.due_date
        model.status = ApprovalStatus(milestone.status).value
        model.paid_at = milestone.paid_at
        model.reviewed_by_id = milestone.reviewed_by
        model.updated_at = milestone.updated_at
        model.deleted_at = milestone.deleted_at

    @staticmethod
    def to_entity(model: MilestoneModel) -> Milestone:
        return Milestone(
            id=model.id,
            user_id=model.user_id,
            invoice_id=model.invoice_id,
            title=model.title,
            description=model.description,
            supporting_doc=model.supporting_doc,
            bank_account_no=model.bank_account_no,
            bank_name=model.bank_name,
            payment_amount=model.payment_amount,
            due_date=model.due_date,
            status=ApprovalStatus(model.status),
            paid_at=model.paid_at,
            reviewed_by=model.reviewed_by_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
            owner=to_user_summary(model.user),
            invoice_number=model.invoice.invoice_number if model.invoice else None,
        )


__all__ = ["MILESTONE_SORT_COLUMNS", "MilestoneRepository"]
