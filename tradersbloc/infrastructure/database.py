"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tradersbloc.config import Settings
from tradersbloc.domain.errors import Conflict, Internal

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_PGCODE = "23505"


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by ``settings``."""

    url = settings.database_url
    if url.startswith("sqlite"):
        options: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite+pysqlite://") or ":memory:" in url:
            options["poolclass"] = StaticPool
        return create_engine(url, **options)
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from tradersbloc.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session bound to the application and close it afterwards."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return ``True`` when ``exc`` was raised by a unique constraint."""

    original = getattr(exc, "orig", None)
    if getattr(original, "pgcode", None) == _UNIQUE_VIOLATION_PGCODE:
        return True
    return "unique" in str(original or exc).lower()


@contextmanager
def persistence_guard(
    session: Session,
    *,
    failure_message: str,
    conflict_message: str | None = None,
) -> Generator[None, None, None]:
    """Translate SQLAlchemy failures raised inside the block into domain errors.

    Unique violations become :class:`Conflict`; every other database error is
    logged, rolled back and re-raised as :class:`Internal`.
    """

    try:
        yield
    except IntegrityError as exc:
        session.rollback()
        if is_unique_violation(exc):
            logger.info("%s: unique constraint violated", failure_message)
            raise Conflict(conflict_message) from exc
        logger.exception(failure_message)
        raise Internal(failure_message) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(failure_message)
        raise Internal(failure_message) from exc


__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db",
    "initialize_database",
    "is_unique_violation",
    "persistence_guard",
]
