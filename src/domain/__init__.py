"""Domain package for business rules and core models."""

from .constants import DEFAULT_CURRENCY
from .errors import EntryValidationError
from .models import (
    Asset,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    BalanceSheetEntry,
    EntryDraft,
    EntryKind,
    Liability,
    NetWorthOverview,
    NetWorthSnapshot,
    NetWorthSummary,
    SnapshotTotals,
    TimeRange,
    TrendPoint,
)
from .services import (
    build_trend_points,
    compute_allocation,
    compute_asset_category_breakdown,
    compute_net_worth,
    compute_net_worth_summary,
    filter_snapshots_by_range,
    format_currency,
    subtract_months,
    total_of,
    validate_entry_form,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "EntryValidationError",
    "Asset",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "BalanceSheetEntry",
    "EntryDraft",
    "EntryKind",
    "Liability",
    "NetWorthOverview",
    "NetWorthSnapshot",
    "NetWorthSummary",
    "SnapshotTotals",
    "TimeRange",
    "TrendPoint",
    "build_trend_points",
    "compute_allocation",
    "compute_asset_category_breakdown",
    "compute_net_worth",
    "compute_net_worth_summary",
    "filter_snapshots_by_range",
    "format_currency",
    "subtract_months",
    "total_of",
    "validate_entry_form",
]
