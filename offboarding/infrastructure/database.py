"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from offboarding.config import get_settings
from offboarding.domain.exceptions import PersistenceError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, object]:
    """Return engine keyword arguments suited to the configured backend."""

    options: dict[str, object] = {"pool_pre_ping": True}
    if make_url(database_url).get_backend_name() == "sqlite":
        # FastAPI runs sync endpoints in a threadpool.
        options["connect_args"] = {"check_same_thread": False}
    return options


database_url = settings.database_url
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from offboarding.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def persistence_guard(session: Session, *, action: str) -> Iterator[None]:
    """Roll back and raise :class:`PersistenceError` on any database failure."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database error while trying to %s", action)
        raise PersistenceError(f"Could not {action}: {exc.__class__.__name__}") from exc


def commit_or_raise(session: Session, *, action: str) -> None:
    """Commit ``session`` or roll it back and raise :class:`PersistenceError`."""

    with persistence_guard(session, action=action):
        session.commit()


__all__ = [
    "Base",
    "SessionLocal",
    "commit_or_raise",
    "engine",
    "get_db",
    "initialize_database",
    "persistence_guard",
]
