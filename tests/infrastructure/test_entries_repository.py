"""Tests for the SQLAlchemy entries repository on in-memory SQLite."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.application.errors import EntryNotFoundError, PersistenceError
from src.domain.models import Asset, EntryDraft, EntryKind, Liability
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.entries_repository import (
    SqlAlchemyEntriesRepository,
    to_money,
)
from src.infrastructure.schema import ensure_schema


class _Clock:
    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(minutes=1)
        return self._now


@pytest.fixture
def db_port():
    adapter = SqlAlchemyDatabaseEngineAdapter("sqlite://")
    ensure_schema(adapter, logger=MagicMock())
    yield adapter
    adapter.dispose()


def _repository(db_port, kind=EntryKind.ASSET) -> SqlAlchemyEntriesRepository:
    ids = count(1)
    return SqlAlchemyEntriesRepository(
        db_port,
        kind,
        clock=_Clock(),
        id_factory=lambda: f"{kind.value}-{next(ids)}",
        logger=MagicMock(),
    )


def _draft(name="Car", category="Vehicle", value="15000.50", description=None):
    return EntryDraft(
        name=name,
        category=category,
        value=Decimal(value),
        description=description,
    )


def test_create_then_list_round_trips_fields(db_port) -> None:
    """A created asset reads back with the same name, category and value."""
    repository = _repository(db_port)

    created = repository.create_entry("user-1", _draft())
    entries = repository.list_entries("user-1")

    assert isinstance(created, Asset)
    assert len(entries) == 1
    entry = entries[0]
    assert entry.id == created.id
    assert entry.name == "Car"
    assert entry.category == "Vehicle"
    assert entry.value == Decimal("15000.50")
    assert entry.description is None
    assert entry.created_at.tzinfo == timezone.utc
    assert entry.created_at == entry.updated_at


def test_list_is_newest_first_and_scoped_to_user(db_port) -> None:
    repository = _repository(db_port)
    repository.create_entry("user-1", _draft(name="First"))
    repository.create_entry("user-2", _draft(name="Other"))
    repository.create_entry("user-1", _draft(name="Second"))

    names = [entry.name for entry in repository.list_entries("user-1")]

    assert names == ["Second", "First"]


def test_assets_and_liabilities_are_separate(db_port) -> None:
    assets = _repository(db_port, EntryKind.ASSET)
    liabilities = _repository(db_port, EntryKind.LIABILITY)
    liabilities.create_entry("user-1", _draft(name="Mortgage", category="Loan"))

    assert assets.list_entries("user-1") == []
    stored = liabilities.list_entries("user-1")
    assert isinstance(stored[0], Liability)


def test_update_overwrites_fields_and_bumps_timestamp(db_port) -> None:
    repository = _repository(db_port)
    created = repository.create_entry("user-1", _draft())

    updated = repository.update_entry(
        "user-1",
        created.id,
        _draft(name="Truck", value="9000", description="Sold the car"),
    )

    assert updated.name == "Truck"
    assert updated.value == Decimal("9000.00")
    assert updated.description == "Sold the car"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert repository.get_entry(created.id).name == "Truck"


def test_update_and_delete_reject_other_users(db_port) -> None:
    """Entries belonging to another user cannot be changed."""
    repository = _repository(db_port)
    created = repository.create_entry("user-1", _draft())

    with pytest.raises(EntryNotFoundError):
        repository.update_entry("user-2", created.id, _draft(name="Stolen"))
    with pytest.raises(EntryNotFoundError):
        repository.delete_entry("user-2", created.id)

    assert repository.get_entry(created.id).name == "Car"


def test_delete_removes_entry(db_port) -> None:
    repository = _repository(db_port)
    created = repository.create_entry("user-1", _draft())

    repository.delete_entry("user-1", created.id)

    assert repository.list_entries("user-1") == []
    assert repository.get_entry(created.id) is None
    with pytest.raises(EntryNotFoundError):
        repository.delete_entry("user-1", created.id)


def test_values_are_rounded_to_cents(db_port) -> None:
    repository = _repository(db_port)

    created = repository.create_entry("user-1", _draft(value="10.005"))

    assert created.value == Decimal("10.01")
    assert to_money("2.344") == Decimal("2.34")


def test_database_errors_become_persistence_errors() -> None:
    """Driver errors are logged and replaced by a generic failure."""
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception("down"))
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    logger = MagicMock()
    repository = SqlAlchemyEntriesRepository(
        db_port,
        EntryKind.LIABILITY,
        logger=logger,
    )

    with pytest.raises(PersistenceError, match="Failed to fetch liability"):
        repository.list_entries("user-1")
    logger.error.assert_called_once()


def test_same_instant_entries_list_newest_first(db_port) -> None:
    frozen = datetime(2024, 5, 1, tzinfo=timezone.utc)
    ids = iter(["id-a", "id-b"])
    repository = SqlAlchemyEntriesRepository(
        db_port,
        EntryKind.ASSET,
        clock=lambda: frozen,
        id_factory=lambda: next(ids),
        logger=MagicMock(),
    )

    repository.create_entry("user-1", _draft(name="Older"))
    repository.create_entry("user-1", _draft(name="Newer"))

    names = [entry.name for entry in repository.list_entries("user-1")]
    assert names == ["Newer", "Older"]
