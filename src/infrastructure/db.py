"""Database infrastructure for the finance tracker.

This module creates the SQLAlchemy engine behind ``DatabaseEnginePort``.
There is no module-level engine: each adapter owns one engine and the
process entry point decides when to dispose of it.
"""

import os

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool, StaticPool

from src.application.ports.database import DatabaseEnginePort

DB_URL_ENV = "FINANCE_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    ``.env`` is loaded first so local settings apply without exporting them.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _is_sqlite(db_url: str) -> bool:
    return make_url(db_url).get_backend_name() == "sqlite"


def _is_memory_sqlite(db_url: str) -> bool:
    url = make_url(db_url)
    return url.get_backend_name() == "sqlite" and url.database in (
        None,
        "",
        ":memory:",
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    In-memory SQLite databases use a ``StaticPool`` so every checkout sees
    the same database. Other URLs get a small ``QueuePool`` with health
    checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if _is_memory_sqlite(db_url):
        engine = create_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    elif _is_sqlite(db_url):
        engine = create_engine(
            db_url,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=5,
            pool_pre_ping=True,
            connect_args={"check_same_thread": False},
            future=True,
        )
    else:
        return create_engine(
            db_url,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=5,
            pool_pre_ping=True,
            future=True,
        )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation owning a single SQLAlchemy engine.

    The engine is created lazily on first use. When ``db_url`` is omitted
    the adapter reads ``FINANCE_DB_URL``.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: Lazily initialized engine owned by this adapter.
        """
        if self._engine is None:
            db_url = self._db_url or _get_env_var(DB_URL_ENV)
            self._engine = _create_engine(db_url)
        return self._engine

    def dispose(self) -> None:
        """Dispose of the engine, if one was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
