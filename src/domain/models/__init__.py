"""Domain models package."""

from .entries import (
    ENTRY_TYPES,
    Asset,
    BalanceSheetEntry,
    EntryDraft,
    EntryKind,
    Liability,
)
from .finance import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    NetWorthOverview,
    NetWorthSummary,
)
from .snapshots import (
    NetWorthSnapshot,
    SnapshotTotals,
    TimeRange,
    TrendPoint,
)

__all__ = [
    "ENTRY_TYPES",
    "Asset",
    "BalanceSheetEntry",
    "EntryDraft",
    "EntryKind",
    "Liability",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "NetWorthOverview",
    "NetWorthSummary",
    "NetWorthSnapshot",
    "SnapshotTotals",
    "TimeRange",
    "TrendPoint",
]
