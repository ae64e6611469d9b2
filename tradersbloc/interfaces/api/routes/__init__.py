from fastapi import FastAPI

from .admin import router as admin_router
from .app_users import router as app_users_router
from .auth import router as auth_router
from .health import router as health_router
from .super_admin import router as super_admin_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(app_users_router)
    app.include_router(users_router)
    app.include_router(admin_router)
    app.include_router(super_admin_router)
