"""Use cases for managing the vendor directory."""

from dataclasses import replace

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Vendor
from tradersbloc.domain.errors import NotFound
from tradersbloc.domain.pagination import Page, PageRequest, build_page
from tradersbloc.infrastructure.repositories import VendorRepository
from tradersbloc.utils import now_utc


def list_vendors(
    session: Session, request: PageRequest, *, search: str | None = None
) -> Page[Vendor]:
    items, total = VendorRepository(session).paginate(request, search=search)
    return build_page(items, total=total, request=request)


def create_vendor(
    session: Session,
    *,
    created_by: int,
    name: str,
    contact_person: str,
    contact_person_phone_number: str,
    phone_number: str,
    address: str,
    email: str,
    bank_name: str,
    bank_account_number: str,
) -> Vendor:
    vendor = Vendor(
        id=None,
        name=name,
        contact_person=contact_person,
        contact_person_phone_number=contact_person_phone_number,
        phone_number=phone_number,
        address=address,
        email=email,
        bank_name=bank_name,
        bank_account_number=bank_account_number,
        created_by=created_by,
        created_at=now_utc(),
    )
    return VendorRepository(session).create(vendor)


def update_vendor(session: Session, *, vendor_id: int, **changes: str | None) -> Vendor:
    """Apply the non-``None`` ``changes`` to the vendor."""

    repository = VendorRepository(session)
    current = repository.get(vendor_id)
    if current is None:
        raise NotFound("Vendor not found")

    updates = {field: value for field, value in changes.items() if value is not None}
    return repository.update(replace(current, **updates, updated_at=now_utc()))


__all__ = ["create_vendor", "list_vendors", "update_vendor"]
