"""Database infrastructure for the net worth tracker.

This module exposes the helpers that create SQLAlchemy engines and the
adapter handed to repositories. The adapter is constructed explicitly by the
composition root and owns its engine, so there is no process-wide client.
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool, StaticPool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

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


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Server databases get a small connection pool with health checks. SQLite
    keeps the driver defaults, and in-memory SQLite shares one connection so
    every checkout sees the same tables.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return create_engine(
                db_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
                future=True,
            )
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The engine is created lazily on first use from the given URL, or from
    ``DATABASE_URL`` when no URL is given, and reused afterwards.
    """

    def __init__(
        self,
        db_url: str | None = None,
        engine: Engine | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional database URL overriding DATABASE_URL.
            engine: Optional ready-made engine, mostly for tests.
        """
        self._db_url = db_url
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the tracker database.
        """
        if self._engine is None:
            db_url = self._db_url or _get_env_var("DATABASE_URL")
            self._engine = _create_engine(db_url)
        return self._engine

    def dispose(self) -> None:
        """Close pooled connections and forget the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
