"""Database connection and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL


def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless each connection opts in."""

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _build_engine(database_url: str):
    if database_url.startswith("sqlite"):
        sqlite_engine = create_engine(
            database_url,
            echo=config.DEBUG and config.LOG_LEVEL == "DEBUG",
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(sqlite_engine)
        return sqlite_engine
    return create_engine(
        database_url,
        echo=config.DEBUG and config.LOG_LEVEL == "DEBUG",
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20,
    )


def _configure_engine(database_url: str) -> None:
    global DATABASE_URL, engine, SessionLocal
    DATABASE_URL = database_url
    engine = _build_engine(database_url)
    SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


_configure_engine(DATABASE_URL)


def get_engine():
    """Return the active SQLAlchemy engine."""
    return engine


def get_active_database_url() -> str:
    """Return the currently bound database URL."""
    return DATABASE_URL


def new_session() -> Session:
    """Open a session on the currently bound engine."""
    return SessionLocal()


def get_db() -> Generator[Session, None, None]:
    """Yield a session for dependency injection contexts."""
    db = new_session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context-manager wrapper for safe DB session lifecycle."""
    db = new_session()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    """Verify DB connectivity during startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:  # pragma: no cover - exercised in deployment.
        logger.error(
            "database.connection_failed",
            extra={"event": "database.connection_failed", "reason": str(exc)},
        )
        return False
