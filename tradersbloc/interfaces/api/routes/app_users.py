"""Rutas para el registro de usuarios de la aplicación móvil."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.app_users import register_app_user
from tradersbloc.infrastructure.database import get_db
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.interfaces.api.dependencies import get_password_hasher
from tradersbloc.interfaces.api.schemas import (
    AppUserRead,
    AppUserRegister,
    AppUserRegistrationResponse,
)

router = APIRouter(prefix="/app-users", tags=["app-users"])


@router.post(
    "/register",
    response_model=AppUserRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: AppUserRegister,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Registra un usuario de la aplicación; la foto de perfil se recibe como URL."""

    app_user = register_app_user(db, hasher, **payload.model_dump())
    return {"success": True, "user": AppUserRead.model_validate(app_user)}
