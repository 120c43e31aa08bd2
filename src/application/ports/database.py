"""Database ports for the net worth tracker.

This module defines the application-layer protocol for accessing the database
engine. Infrastructure implementations are expected to provide a concrete
adapter that satisfies this port, and callers pass that adapter explicitly to
the repositories that need it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the SQLAlchemy engine backing the tracker tables."""

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the tracker database.
        """


__all__ = ["DatabaseEnginePort"]
