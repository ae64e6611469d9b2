"""Use case listing the vendors a customer can invoice against."""

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Vendor
from tradersbloc.infrastructure.repositories import VendorRepository


def list_active_vendors(session: Session) -> list[Vendor]:
    return list(VendorRepository(session).list_active())


__all__ = ["list_active_vendors"]
