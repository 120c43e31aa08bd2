"""Application use cases package."""

from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .get_net_worth_trend import GetNetWorthTrendUseCase, NetWorthTrend
from .manage_entries import (
    CreateEntryUseCase,
    DeleteEntryUseCase,
    UpdateEntryUseCase,
)
from .take_snapshot import SnapshotRecorder, TakeSnapshotUseCase

__all__ = [
    "CreateEntryUseCase",
    "DeleteEntryUseCase",
    "UpdateEntryUseCase",
    "GetNetWorthSummaryUseCase",
    "GetNetWorthTrendUseCase",
    "NetWorthTrend",
    "SnapshotRecorder",
    "TakeSnapshotUseCase",
]
