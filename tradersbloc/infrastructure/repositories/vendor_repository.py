"""Persistence layer for vendors."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Vendor
from tradersbloc.domain.pagination import PageRequest
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import VendorModel

from .pagination import contains_any, paginate

VENDOR_SORT_COLUMNS = {
    "name": VendorModel.name,
    "contact_person": VendorModel.contact_person,
    "email": VendorModel.email,
    "phone_number": VendorModel.phone_number,
    "created_at": VendorModel.created_at,
}


class VendorRepository:
    """Provide CRUD operations for :class:`Vendor` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, vendor_id: int) -> Vendor | None:
        model = self._get_model(vendor_id)
        return self._to_entity(model) if model else None

    def list_active(self) -> Sequence[Vendor]:
        query = (
            self.session.query(VendorModel)
            .filter(VendorModel.deleted_at.is_(None))
            .order_by(VendorModel.name.asc(), VendorModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def paginate(
        self, request: PageRequest, *, search: str | None = None
    ) -> tuple[list[Vendor], int]:
        query = self.session.query(VendorModel).filter(VendorModel.deleted_at.is_(None))
        if search:
            query = query.filter(
                contains_any(
                    search,
                    VendorModel.name,
                    VendorModel.contact_person,
                    VendorModel.email,
                    VendorModel.phone_number,
                )
            )
        models, total = paginate(
            query,
            request,
            sort_columns=VENDOR_SORT_COLUMNS,
            default_order=[VendorModel.name.asc()],
            tiebreaker=VendorModel.id.asc(),
        )
        return [self._to_entity(model) for model in models], total

    def create(self, vendor: Vendor) -> Vendor:
        model = VendorModel()
        self._apply_entity_to_model(model, vendor)
        with persistence_guard(self.session, failure_message="Failed to create vendor"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, vendor: Vendor) -> Vendor:
        model = self._get_model(vendor.id)
        if model is None:
            msg = f"Vendor with id {vendor.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, vendor)
        with persistence_guard(self.session, failure_message="Failed to update vendor"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, vendor_id: int | None) -> VendorModel | None:
        return (
            self.session.query(VendorModel)
            .filter(VendorModel.id == vendor_id)
            .filter(VendorModel.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: VendorModel, vendor: Vendor) -> None:
        model.name = vendor.name
        model.contact_person = vendor.contact_person
        model.contact_person_phone_number = vendor.contact_person_phone_number
        model.phone_number = vendor.phone_number
        model.address = vendor.address
        model.email = vendor.email
        model.bank_name = vendor.bank_name
        model.bank_account_number = vendor.bank_account_number
        model.created_by = vendor.created_by
        model.updated_at = vendor.updated_at
        model.deleted_at = vendor.deleted_at

    @staticmethod
    def _to_entity(model: VendorModel) -> Vendor:
        return Vendor(
            id=model.id,
            name=model.name,
            contact_person=model.contact_person,
            contact_person_phone_number=model.contact_person_phone_number,
            phone_number=model.phone_number,
            address=model.address,
            email=model.email,
            bank_name=model.bank_name,
            bank_account_number=model.bank_account_number,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )


__all__ = ["VENDOR_SORT_COLUMNS", "VendorRepository"]
