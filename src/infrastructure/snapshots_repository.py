"""SQLAlchemy-backed repository for net worth snapshots."""

from datetime import datetime
from typing import Callable
from uuid import uuid4

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import PersistenceError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshots_repository import SnapshotsRepositoryPort
from src.domain.models import NetWorthSnapshot, SnapshotTotals
from src.infrastructure.entries_repository import to_money
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import snapshots_table
from src.utils.decimal_utils import coerce_decimal
from src.utils.time_utils import IncreasingClock, as_utc, utc_now


class SqlAlchemySnapshotsRepository(SnapshotsRepositoryPort):
    """Append-only snapshot log stored in ``net_worth_snapshots``."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
            clock: Callable returning the current UTC time.
            id_factory: Callable returning new snapshot identifiers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._clock = IncreasingClock(clock)
        self._id_factory = id_factory
        self._logger = logger or get_app_logger()

    def create_snapshot(
        self,
        user_id: str,
        totals: SnapshotTotals,
    ) -> NetWorthSnapshot:
        """Insert one snapshot row; existing rows are never touched."""
        values = {
            "id": self._id_factory(),
            "user_id": user_id,
            "assets": to_money(totals.assets),
            "liabilities": to_money(totals.liabilities),
            "networth": to_money(totals.networth),
            "created_at": self._clock(),
        }
        try:
            with self._db_port.get_engine().begin() as conn:
                conn.execute(insert(snapshots_table).values(**values))
        except SQLAlchemyError as exc:
            self._logger.error(f"Error creating snapshot: {exc}")
            raise PersistenceError("Failed to create snapshot") from exc
        return NetWorthSnapshot(**values)

    def list_snapshots(self, user_id: str) -> list[NetWorthSnapshot]:
        """Return every snapshot of the user, newest first."""
        table = snapshots_table
        query = (
            select(table)
            .where(table.c.user_id == user_id)
            .order_by(table.c.created_at.desc(), table.c.id)
        )
        try:
            with self._db_port.get_engine().connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Error fetching snapshots: {exc}")
            raise PersistenceError("Failed to fetch snapshots") from exc
        return [
            NetWorthSnapshot(
                id=row.id,
                user_id=row.user_id,
                assets=coerce_decimal(row.assets),
                liabilities=coerce_decimal(row.liabilities),
                networth=coerce_decimal(row.networth),
                created_at=as_utc(row.created_at),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemySnapshotsRepository"]
