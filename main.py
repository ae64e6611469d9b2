import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradersbloc.config import Settings, get_settings
from tradersbloc.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from tradersbloc.infrastructure.security import PasswordHasher, TokenService
from tradersbloc.interfaces.api.access import RouteAccessMiddleware
from tradersbloc.interfaces.api.errors import register_exception_handlers
from tradersbloc.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database(app.state.engine)
    logger.info("Database initialised")
    yield
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="TradersBloc API", lifespan=lifespan)

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.password_hash_rounds)
    app.state.token_service = TokenService.from_settings(settings)

    # Las rutas de personal se filtran por prefijo antes de llegar al router.
    app.add_middleware(
        RouteAccessMiddleware, unauthorized_path=settings.unauthorized_path
    )
    # Autoriza peticiones desde el panel web configurado en CORS_ORIGINS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
