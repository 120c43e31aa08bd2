"""SQLAlchemy-backed repository for assets and liabilities."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable
from uuid import uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import EntryNotFoundError, PersistenceError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.models import ENTRY_TYPES, BalanceSheetEntry, EntryDraft, EntryKind
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ENTRY_TABLES
from src.utils.decimal_utils import coerce_decimal
from src.utils.time_utils import IncreasingClock, as_utc, utc_now


CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Round a decimal-like value to the stored two-decimal scale."""
    return coerce_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _new_id() -> str:
    return str(uuid4())


class SqlAlchemyEntriesRepository(EntriesRepositoryPort):
    """Repository backed by SQLAlchemy for one side of the balance sheet."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        kind: EntryKind,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = _new_id,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
            kind: Whether this repository manages assets or liabilities.
            clock: Callable returning the current UTC time.
            id_factory: Callable returning new entry identifiers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self.kind = kind
        self._table = ENTRY_TABLES[kind]
        self._entry_type = ENTRY_TYPES[kind]
        self._clock = IncreasingClock(clock)
        self._id_factory = id_factory
        self._logger = logger or get_app_logger()

    def list_entries(self, user_id: str) -> list[BalanceSheetEntry]:
        """Return the user's entries, newest first."""
        table = self._table
        query = (
            select(table)
            .where(table.c.user_id == user_id)
            .order_by(table.c.created_at.desc(), table.c.id)
        )
        try:
            with self._db_port.get_engine().connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise self._failure("fetch", exc) from exc
        return [self._to_entry(row) for row in rows]

    def get_entry(self, entry_id: str) -> BalanceSheetEntry | None:
        """Return a single entry or None when it does not exist."""
        query = select(self._table).where(self._table.c.id == entry_id)
        try:
            with self._db_port.get_engine().connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise self._failure("fetch", exc) from exc
        return self._to_entry(row) if row is not None else None

    def create_entry(
        self,
        user_id: str,
        draft: EntryDraft,
    ) -> BalanceSheetEntry:
        """Insert a new entry owned by the user."""
        now = self._clock()
        values = {
            "id": self._id_factory(),
            "user_id": user_id,
            "name": draft.name,
            "category": draft.category,
            "value": to_money(draft.value),
            "description": draft.description,
            "created_at": now,
            "updated_at": now,
        }
        try:
            with self._db_port.get_engine().begin() as conn:
                conn.execute(insert(self._table).values(**values))
        except SQLAlchemyError as exc:
            raise self._failure("create", exc) from exc
        self._logger.info(f"Created {self.kind.value} id={values['id']}")
        return self._entry_type(**values)

    def update_entry(
        self,
        user_id: str,
        entry_id: str,
        draft: EntryDraft,
    ) -> BalanceSheetEntry:
        """Overwrite name, category, value and description of an entry.

        Raises:
            EntryNotFoundError: If no entry with this id belongs to the user.
            PersistenceError: If the database rejects the update.
        """
        table = self._table
        statement = (
            update(table)
            .where(table.c.id == entry_id, table.c.user_id == user_id)
            .values(
                name=draft.name,
                category=draft.category,
                value=to_money(draft.value),
                description=draft.description,
                updated_at=self._clock(),
            )
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(statement)
                if result.rowcount == 0:
                    raise EntryNotFoundError(
                        f"{self.kind.label} {entry_id} not found"
                    )
                row = conn.execute(
                    select(table).where(table.c.id == entry_id)
                ).one()
        except SQLAlchemyError as exc:
            raise self._failure("update", exc) from exc
        self._logger.info(f"Updated {self.kind.value} id={entry_id}")
        return self._to_entry(row)

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        """Delete an entry owned by the user.

        Raises:
            EntryNotFoundError: If no entry with this id belongs to the user.
            PersistenceError: If the database rejects the delete.
        """
        table = self._table
        statement = delete(table).where(
            table.c.id == entry_id,
            table.c.user_id == user_id,
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(statement)
                if result.rowcount == 0:
                    raise EntryNotFoundError(
                        f"{self.kind.label} {entry_id} not found"
                    )
        except SQLAlchemyError as exc:
            raise self._failure("delete", exc) from exc
        self._logger.info(f"Deleted {self.kind.value} id={entry_id}")

    def _failure(self, verb: str, exc: Exception) -> PersistenceError:
        self._logger.error(f"Error trying to {verb} {self.kind.value}: {exc}")
        return PersistenceError(f"Failed to {verb} {self.kind.value}")

    def _to_entry(self, row) -> BalanceSheetEntry:
        return self._entry_type(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            category=row.category,
            value=coerce_decimal(row.value),
            description=row.description,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )


__all__ = ["SqlAlchemyEntriesRepository", "to_money"]
