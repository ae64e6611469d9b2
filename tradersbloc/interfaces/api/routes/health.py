"""Rutas públicas de estado y de acceso denegado."""

from fastapi import APIRouter

from tradersbloc.domain.errors import Forbidden
from tradersbloc.interfaces.api.schemas import MessageResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=MessageResponse)
def health_check():
    """Confirma que la API está en funcionamiento."""

    return {"message": "API up and running..."}


@router.get("/unauthorized", response_model=MessageResponse)
def unauthorized():
    """Destino de las redirecciones por rol insuficiente."""

    raise Forbidden("You are not allowed to access this resource")
