"""Persistence layer for application-only users."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradersbloc.domain.entities import AppUser
from tradersbloc.infrastructure.database import persistence_guard
from tradersbloc.infrastructure.models import AppUserModel


class AppUserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_email(self, email: str) -> AppUser | None:
        model = (
            self.session.query(AppUserModel)
            .filter(func.lower(AppUserModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, app_user: AppUser) -> AppUser:
        model = AppUserModel(
            first_name=app_user.first_name,
            last_name=app_user.last_name,
            phone_number=app_user.phone_number,
            email=app_user.email,
            password=app_user.password,
            profile_picture=app_user.profile_picture,
            date_of_birth=app_user.date_of_birth,
        )
        with persistence_guard(
            self.session,
            failure_message="Failed to register user",
            conflict_message="User already exists",
        ):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AppUserModel) -> AppUser:
        return AppUser(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            phone_number=model.phone_number,
            email=model.email,
            password=model.password,
            profile_picture=model.profile_picture,
            date_of_birth=model.date_of_birth,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )


__all__ = ["AppUserRepository"]
