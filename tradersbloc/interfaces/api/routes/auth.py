"""Endpoints relacionados con autenticación y registro de clientes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.auth import AuthenticationStatus, authenticate
from tradersbloc.application.use_cases.users import register_user as register_user_uc
from tradersbloc.domain.errors import Forbidden, Unauthenticated
from tradersbloc.infrastructure.database import get_db
from tradersbloc.infrastructure.security import PasswordHasher, TokenService
from tradersbloc.interfaces.api.dependencies import (
    get_password_hasher,
    get_token_service,
)
from tradersbloc.interfaces.api.schemas import Token, UserRead, UserRegister

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


# Nota: se conserva la firma esperada por OAuth2PasswordRequestForm.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Autentica por correo electrónico y devuelve un token JWT con la sesión."""

    auth_session, auth_status = authenticate(
        db, hasher, form_data.username, form_data.password
    )

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise Unauthenticated("Incorrect email or password")

    if auth_status is AuthenticationStatus.SUSPENDED:
        logger.info("Suspended admin %s attempted to sign in", auth_session.email)
        raise Forbidden("Account suspended")

    return {
        "access_token": tokens.create_access_token(auth_session),
        "token_type": "bearer",
        "role": auth_session.role.value,
    }


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserRegister,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Registra un nuevo cliente final."""

    user = register_user_uc(
        db,
        hasher,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        phone_number=user_in.phone_number,
        email=user_in.email,
        password=user_in.password,
        company_name=user_in.company_name,
        tax_id=user_in.tax_id,
        industry=user_in.industry,
    )
    return UserRead.model_validate(user)
