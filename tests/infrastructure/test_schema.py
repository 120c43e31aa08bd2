"""Tests for the schema bootstrap."""

from unittest.mock import MagicMock

from sqlalchemy import inspect

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import ensure_schema


def test_ensure_schema_creates_tables_idempotently() -> None:
    """Running the bootstrap twice keeps the same tables."""
    adapter = SqlAlchemyDatabaseEngineAdapter("sqlite://")
    logger = MagicMock()

    first = ensure_schema(adapter, logger=logger)
    second = ensure_schema(adapter, logger=logger)

    expected = ["assets", "liabilities", "net_worth_snapshots"]
    assert first == second == expected
    inspector = inspect(adapter.get_engine())
    assert sorted(inspector.get_table_names()) == expected
    columns = {column["name"] for column in inspector.get_columns("assets")}
    assert columns == {
        "id",
        "user_id",
        "name",
        "category",
        "value",
        "description",
        "created_at",
        "updated_at",
    }
    assert logger.info.call_count == 2
    adapter.dispose()
