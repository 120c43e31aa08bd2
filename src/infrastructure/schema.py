"""Table definitions and schema bootstrap for the tracker database."""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
)

from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import (
    CATEGORY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    MONEY_PRECISION,
    MONEY_SCALE,
    NAME_MAX_LENGTH,
)
from src.domain.models import EntryKind
from src.infrastructure.logging.logger import get_app_logger


metadata = MetaData()


def _money_column(name: str) -> Column:
    return Column(
        name,
        Numeric(MONEY_PRECISION, MONEY_SCALE),
        nullable=False,
    )


def _entries_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", String(36), primary_key=True),
        Column("user_id", String(255), nullable=False),
        Column("name", String(NAME_MAX_LENGTH), nullable=False),
        Column("category", String(CATEGORY_MAX_LENGTH), nullable=False),
        _money_column("value"),
        Column("description", String(DESCRIPTION_MAX_LENGTH), nullable=True),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
        Index(f"ix_{name}_user_created", "user_id", "created_at"),
    )


assets_table = _entries_table("assets")
liabilities_table = _entries_table("liabilities")

snapshots_table = Table(
    "net_worth_snapshots",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(255), nullable=False),
    _money_column("assets"),
    _money_column("liabilities"),
    _money_column("networth"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Index("ix_net_worth_snapshots_user_created", "user_id", "created_at"),
)

ENTRY_TABLES: dict[EntryKind, Table] = {
    EntryKind.ASSET: assets_table,
    EntryKind.LIABILITY: liabilities_table,
}


def ensure_schema(db_port: DatabaseEnginePort, logger=None) -> list[str]:
    """Create the tracker tables and indexes when they do not exist.

    Args:
        db_port: Port providing access to the tracker engine.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[str]: Names of the managed tables.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    metadata.create_all(engine, checkfirst=True)
    table_names = sorted(metadata.tables)
    resolved_logger.info(f"Schema ready: {', '.join(table_names)}")
    return table_names


__all__ = [
    "metadata",
    "assets_table",
    "liabilities_table",
    "snapshots_table",
    "ENTRY_TABLES",
    "ensure_schema",
]
