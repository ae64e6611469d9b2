"""Persistence layer for end customer data."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradersbloc.domain.entities import User, UserSummary
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import UserModel


class UserRepository:
    """Provide CRUD operations for :class:`User` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int | None, *, include_deleted: bool = False) -> User | None:
        if user_id is None:
            return None
        model = self._get_model(include_deleted=include_deleted, id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        with persistence_guard(
            self.session,
            failure_message="Failed to create user",
            conflict_message="User already exists",
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        with persistence_guard(
            self.session,
            failure_message="Failed to update user",
            conflict_message="Email already exists",
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def count_created_between(
        self, start: datetime, end: datetime | None = None
    ) -> int:
        query = self.session.query(func.count(UserModel.id)).filter(
            UserModel.created_at >= start
        )
        if end is not None:
            query = query.filter(UserModel.created_at < end)
        return int(query.scalar() or 0)

    def new_users_per_day(self, start: datetime) -> list[tuple[str, int]]:
        day = func.date(UserModel.created_at)
        rows = (
            self.session.query(day, func.count(UserModel.id))
            .filter(UserModel.created_at >= start)
            .group_by(day)
            .order_by(day)
            .all()
        )
        return [(str(value), int(count)) for value, count in rows]

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        query = self.session.query(UserModel)
        if not include_deleted:
            query = query.filter(UserModel.deleted_at.is_(None))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone_number = user.phone_number
        model.email = user.email
        model.password = user.password
        model.company_name = user.company_name
        model.tax_id = user.tax_id
        model.industry = user.industry
        if user.created_at is not None:
            model.created_at = user.created_at
        model.updated_at = user.updated_at
        model.deleted_at = user.deleted_at

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            phone_number=model.phone_number,
            email=model.email,
            password=model.password,
            company_name=model.company_name,
            tax_id=model.tax_id,
            industry=model.industry,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )


def to_user_summary(model: UserModel | None) -> UserSummary | None:
    """Return the summary embedded in records owned by ``model``."""

    if model is None:
        return None
    return UserSummary(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        company_name=model.company_name,
    )


__all__ = ["UserRepository", "to_user_summary"]
