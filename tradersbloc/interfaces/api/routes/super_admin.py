"""Rutas reservadas al super administrador para gestionar al personal."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tradersbloc.application.use_cases.super_admins import (
    create_admin as create_admin_uc,
    delete_admin as delete_admin_uc,
    update_admin as update_admin_uc,
    update_admin_permissions as update_admin_permissions_uc,
)
from tradersbloc.domain.entities import AuthSession
from tradersbloc.infrastructure.database import get_db
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.interfaces.api.dependencies import get_password_hasher, require_super_admin
from tradersbloc.interfaces.api.schemas import (
    AdminCreate,
    AdminPermissionsUpdate,
    AdminRead,
    AdminUpdate,
)

router = APIRouter(prefix="/super-admin", tags=["super-admin"])


@router.post("/admins", response_model=AdminRead, status_code=status.HTTP_201_CREATED)
def create_admin(
    payload: AdminCreate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    _: AuthSession = Depends(require_super_admin),
):
    """Crea una cuenta de administrador con rol ``ADMIN``."""

    admin = create_admin_uc(db, hasher, **payload.model_dump())
    return AdminRead.model_validate(admin)


@router.patch("/admins/{admin_id}", response_model=AdminRead)
def update_admin(
    admin_id: int,
    payload: AdminUpdate,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_super_admin),
):
    """Cambia el estado de un administrador (activo o suspendido)."""

    admin = update_admin_uc(
        db,
        auth_session=auth_session,
        admin_id=admin_id,
        status=payload.status,
        role=payload.role,
    )
    return AdminRead.model_validate(admin)


@router.patch("/admins/{admin_id}/permissions", response_model=AdminRead)
def update_admin_permissions(
    admin_id: int,
    payload: AdminPermissionsUpdate,
    db: Session = Depends(get_db),
    _: AuthSession = Depends(require_super_admin),
):
    admin = update_admin_permissions_uc(db, admin_id=admin_id, role=payload.role)
    return AdminRead.model_validate(admin)


@router.delete("/admins/{admin_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_admin(
    admin_id: int,
    db: Session = Depends(get_db),
    auth_session: AuthSession = Depends(require_super_admin),
):
    """Elimina definitivamente la cuenta de un administrador."""

    delete_admin_uc(db, auth_session=auth_session, admin_id=admin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
