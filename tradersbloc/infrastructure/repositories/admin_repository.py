"""Persistence layer for staff principals."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradersbloc.domain.entities import Admin, AdminStatus, Role
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import AdminModel


class AdminRepository:
    """Provide CRUD operations for :class:`Admin` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, admin_id: int) -> Admin | None:
        model = self.session.get(AdminModel, admin_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Admin | None:
        model = (
            self.session.query(AdminModel)
            .filter(func.lower(AdminModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_ids_by_role(self, role: Role) -> list[int]:
        """Return the identifiers of every admin holding exactly ``role``."""

        query = (
            self.session.query(AdminModel.id)
            .filter(AdminModel.role == role.value)
            .order_by(AdminModel.id)
        )
        return [admin_id for (admin_id,) in query.all()]

    def create(self, admin: Admin) -> Admin:
        model = AdminModel()
        self._apply_entity_to_model(model, admin)
        with persistence_guard(
            self.session,
            failure_message="Failed to create admin",
            conflict_message="Email already exists",
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, admin: Admin) -> Admin:
        model = self.session.get(AdminModel, admin.id)
        if model is None:
            msg = f"Admin with id {admin.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, admin)
        with persistence_guard(
            self.session,
            failure_message="Failed to update admin data",
            conflict_message="Email already exists",
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, admin_id: int) -> bool:
        """Delete an admin by id.

        Returns ``True`` when a record was removed and ``False`` when the
        requested admin was not found.
        """

        model = self.session.get(AdminModel, admin_id)
        if model is None:
            return False
        with persistence_guard(self.session, failure_message="Failed to delete admin"):
            self.session.delete(model)
            self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: AdminModel, admin: Admin) -> None:
        model.name = admin.name
        model.email = admin.email
        model.password = admin.password
        model.role = Role(admin.role).value
        model.status = AdminStatus(admin.status).value
        if admin.created_at is not None:
            model.created_at = admin.created_at
        model.updated_at = admin.updated_at

    @staticmethod
    def _to_entity(model: AdminModel) -> Admin:
        return Admin(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=Role(model.role),
            status=AdminStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["AdminRepository"]
