"""Persistence layer for invoices."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from tradersbloc.domain.entities import ApprovalStatus, Invoice
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import InvoiceModel, UserModel, VendorModel

from .milestone_repository import MilestoneRepository
from .pagination import apply_range, contains_any, paginate
from .user_repository import to_user_summary

INVOICE_SORT_COLUMNS = {
    "vendor": VendorModel.name,
    "invoice_number": InvoiceModel.invoice_number,
    "description": InvoiceModel.description,
    "total_price": InvoiceModel.total_price,
    "due_date": InvoiceModel.due_date,
    "status": InvoiceModel.status,
    "submission_date": InvoiceModel.submission_date,
    "created_at": InvoiceModel.created_at,
}


class InvoiceRepository:
    """Provide CRUD and reporting queries for :class:`Invoice` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, invoice_id: int) -> Invoice | None:
        model = self._get_model(invoice_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self, user_id: int, *, include_milestones: bool = False
    ) -> Sequence[Invoice]:
        query = (
            self.session.query(InvoiceModel)
            .filter(InvoiceModel.user_id == user_id)
            .filter(InvoiceModel.deleted_at.is_(None))
            .order_by(InvoiceModel.submission_date.desc(), InvoiceModel.id.desc())
        )
        if include_milestones:
            query = query.options(selectinload(InvoiceModel.milestones))
        return [
            self._to_entity(model, include_milestones=include_milestones)
            for model in query.all()
        ]

    def paginate(
        self,
        request: PageRequest,
        *,
        search: str | None = None,
        status: ApprovalStatus | None = None,
        vendor: str | None = None,
        due_from: datetime | None = None,
        due_to: datetime | None = None,
        due_before: datetime | None = None,
    ) -> tuple[list[Invoice], int]:
        query = (
            self.session.query(InvoiceModel)
            .outerjoin(UserModel, InvoiceModel.user_id == UserModel.id)
            .outerjoin(VendorModel, InvoiceModel.vendor_id == VendorModel.id)
            .filter(InvoiceModel.deleted_at.is_(None))
        )
        if search:
            query = query.filter(
                contains_any(
                    search,
                    UserModel.first_name,
                    UserModel.last_name,
                    InvoiceModel.description,
                    InvoiceModel.invoice_number,
                )
            )
        if status is not None:
            query = query.filter(InvoiceModel.status == ApprovalStatus(status).value)
        if vendor:
            query = query.filter(contains_any(vendor, VendorModel.name))
        query = apply_range(query, InvoiceModel.due_date, due_from, due_to)
        if due_before is not None:
            query = query.filter(InvoiceModel.due_date < due_before)

        models, total = paginate(
            query,
            request,
            sort_columns=INVOICE_SORT_COLUMNS,
            default_order=[InvoiceModel.submission_date.desc()],
            tiebreaker=InvoiceModel.id.desc(),
        )
        return [self._to_entity(model) for model in models], total

    def create(self, invoice: Invoice) -> Invoice:
        model = InvoiceModel()
        self._apply_entity_to_model(model, invoice)
        with persistence_guard(self.session, failure_message="Failed to create invoice"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, invoice: Invoice) -> Invoice:
        model = self._get_model(invoice.id)
        if model is None:
            msg = f"Invoice with id {invoice.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, invoice)
        with persistence_guard(self.session, failure_message="Failed to update invoice"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def count_by_status(self, status: ApprovalStatus) -> int:
        return int(
            self.session.query(func.count(InvoiceModel.id))
            .filter(InvoiceModel.status == status.value)
            .filter(InvoiceModel.deleted_at.is_(None))
            .scalar()
            or 0
        )

    def count_submitted_between(
        self, start: datetime, end: datetime | None = None
    ) -> int:
        query = self._submitted_between(func.count(InvoiceModel.id), start, end)
        return int(query.scalar() or 0)

    def sum_total_between(self, start: datetime, end: datetime | None = None) -> float:
        query = self._submitted_between(
            func.coalesce(func.sum(InvoiceModel.total_price), 0), start, end
        )
        return float(query.scalar() or 0)

    def trends_since(self, start: datetime) -> list[tuple[str, float, int]]:
        """Return ``(day, total amount, invoice count)`` rows ordered by day."""

        day = func.date(InvoiceModel.submission_date)
        rows = (
            self.session.query(
                day,
                func.coalesce(func.sum(InvoiceModel.total_price), 0),
                func.count(InvoiceModel.id),
            )
            .filter(InvoiceModel.submission_date >= start)
            .filter(InvoiceModel.deleted_at.is_(None))
            .group_by(day)
            .order_by(day)
            .all()
        )
        return [(str(value), float(amount), int(count)) for value, amount, count in rows]

    def status_distribution(self) -> dict[str, int]:
        rows = (
            self.session.query(InvoiceModel.status, func.count(InvoiceModel.id))
            .filter(InvoiceModel.deleted_at.is_(None))
            .group_by(InvoiceModel.status)
            .all()
        )
        return {status: int(count) for status, count in rows}

    def _submitted_between(self, column, start: datetime, end: datetime | None):
        query = (
            self.session.query(column)
            .filter(InvoiceModel.submission_date >= start)
            .filter(InvoiceModel.deleted_at.is_(None))
        )
        if end is not None:
            query = query.filter(InvoiceModel.submission_date < end)
        return query

    def _get_model(self, invoice_id: int | None) -> InvoiceModel | None:
        return (
            self.session.query(InvoiceModel)
            .filter(InvoiceModel.id == invoice_id)
            .filter(InvoiceModel.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: InvoiceModel, invoice: Invoice) -> None:
        model.user_id = invoice.user_id
        model.vendor_id = invoice.vendor_id
        model.invoice_number = invoice.invoice_number
        model.description = invoice.description
        model.quantity = invoice.quantity
        model.price_per_unit = invoice.price_per_unit
        model.total_price = invoice.total_price
        model.invoice_file = invoice.invoice_file
        model.payment_terms = invoice.payment_terms
        model.due_date = invoice.due_date
        model.status = ApprovalStatus(invoice.status).value
        if invoice.submission_date is not None:
            model.submission_date = invoice.submission_date
        model.review_date = invoice.review_date
        model.admin_id = invoice.reviewed_by
        model.updated_at = invoice.updated_at
        model.deleted_at = invoice.deleted_at

    @staticmethod
    def _to_entity(model: InvoiceModel, *, include_milestones: bool = False) -> Invoice:
        milestones = []
        if include_milestones:
            milestones = [
                MilestoneRepository.to_entity(milestone)
                for milestone in model.milestones
                if milestone.deleted_at is None
            ]
        return Invoice(
            id=model.id,
            user_id=model.user_id,
            vendor_id=model.vendor_id,
            invoice_number=model.invoice_number,
            description=model.description,
            quantity=model.quantity,
            price_per_unit=model.price_per_unit,
            total_price=model.total_price,
            invoice_file=model.invoice_file,
            payment_terms=model.payment_terms,
            due_date=model.due_date,
            status=ApprovalStatus(model.status),
            submission_date=model.submission_date,
            review_date=model.review_date,
            reviewed_by=model.admin_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
            owner=to_user_summary(model.user),
            vendor_name=model.vendor.name if model.vendor is not None else None,
            milestones=milestones,
        )


__all__ = ["INVOICE_SORT_COLUMNS", "InvoiceRepository"]
