"""Database configuration and session management.

The engine and session factory are owned by the FastAPI application
(``app.state``) instead of living at module level, so every application
instance, and therefore every test, works against its own store.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasktrail.domain.exceptions import StorageFailureError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"}


def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``."""

    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    # Request handlers run in a threadpool, so SQLite connections cross threads.
    options: dict = {"connect_args": {"check_same_thread": False}}
    if _is_in_memory_sqlite(database_url):
        options["poolclass"] = StaticPool
    return create_engine(database_url, **options)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return the session factory bound to ``engine``."""

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from tasktrail.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Run the enclosed writes as one unit of work.

    Commits when the block finishes and rolls back on any exception. Database
    errors surface as :class:`StorageFailureError`; other exceptions propagate
    unchanged after the rollback.
    """

    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database error, unit of work rolled back")
        raise StorageFailureError() from exc
    except Exception:
        session.rollback()
        raise


__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db",
    "initialize_database",
    "transaction",
]
