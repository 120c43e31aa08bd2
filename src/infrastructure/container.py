"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.ports.snapshots_repository import SnapshotsRepositoryPort
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_net_worth_trend import (
    GetNetWorthTrendUseCase,
)
from src.application.use_cases.manage_entries import (
    CreateEntryUseCase,
    DeleteEntryUseCase,
    UpdateEntryUseCase,
)
from src.application.use_cases.take_snapshot import (
    SnapshotRecorder,
    TakeSnapshotUseCase,
)
from src.domain.models import EntryKind
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.entries_repository import SqlAlchemyEntriesRepository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import AppSettings
from src.infrastructure.snapshots_repository import (
    SqlAlchemySnapshotsRepository,
)


def build_database_adapter(
    settings: AppSettings | None = None,
) -> DatabaseEnginePort:
    """Return a new database adapter for the configured URL."""
    resolved = settings or AppSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(db_url=resolved.database_url)


def build_entries_repository(
    db_port: DatabaseEnginePort,
    kind: EntryKind,
) -> EntriesRepositoryPort:
    """Return the repository for assets or liabilities."""
    return SqlAlchemyEntriesRepository(db_port, kind, logger=get_app_logger())


def build_snapshots_repository(
    db_port: DatabaseEnginePort,
) -> SnapshotsRepositoryPort:
    """Return the snapshot repository."""
    return SqlAlchemySnapshotsRepository(db_port, logger=get_app_logger())


def build_net_worth_summary_use_case(
    db_port: DatabaseEnginePort,
    settings: AppSettings,
) -> GetNetWorthSummaryUseCase:
    """Return the dashboard summary use case."""
    return GetNetWorthSummaryUseCase(
        assets_repository=build_entries_repository(db_port, EntryKind.ASSET),
        liabilities_repository=build_entries_repository(
            db_port,
            EntryKind.LIABILITY,
        ),
        currency_code=settings.currency_code,
        logger=get_app_logger(),
    )


def build_take_snapshot_use_case(
    db_port: DatabaseEnginePort,
    settings: AppSettings,
) -> TakeSnapshotUseCase:
    """Return the snapshot use case."""
    return TakeSnapshotUseCase(
        assets_repository=build_entries_repository(db_port, EntryKind.ASSET),
        liabilities_repository=build_entries_repository(
            db_port,
            EntryKind.LIABILITY,
        ),
        recorder=SnapshotRecorder(
            build_snapshots_repository(db_port),
            logger=get_app_logger(),
        ),
        currency_code=settings.currency_code,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


def build_net_worth_trend_use_case(
    db_port: DatabaseEnginePort,
) -> GetNetWorthTrendUseCase:
    """Return the trend use case."""
    return GetNetWorthTrendUseCase(
        build_snapshots_repository(db_port),
        logger=get_app_logger(),
    )


def build_entry_actions(
    db_port: DatabaseEnginePort,
    kind: EntryKind,
) -> tuple[CreateEntryUseCase, UpdateEntryUseCase, DeleteEntryUseCase]:
    """Return the create, update and delete use cases for one entry kind."""
    repository = build_entries_repository(db_port, kind)
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    return (
        CreateEntryUseCase(repository, logger=logger, usage_logger=usage_logger),
        UpdateEntryUseCase(repository, logger=logger, usage_logger=usage_logger),
        DeleteEntryUseCase(repository, logger=logger, usage_logger=usage_logger),
    )


__all__ = [
    "build_database_adapter",
    "build_entries_repository",
    "build_snapshots_repository",
    "build_net_worth_summary_use_case",
    "build_take_snapshot_use_case",
    "build_net_worth_trend_use_case",
    "build_entry_actions",
]
