"""Domain services package."""

from .finance import (
    compute_allocation,
    compute_asset_category_breakdown,
    compute_net_worth,
    compute_net_worth_summary,
    total_of,
)
from .formatting import (
    format_currency,
    format_delta,
    format_delta_with_percent,
    format_percent,
    format_summary,
)
from .trends import (
    build_trend_points,
    filter_snapshots_by_range,
    range_start,
    subtract_months,
)
from .validation import validate_entry_form

__all__ = [
    "compute_allocation",
    "compute_asset_category_breakdown",
    "compute_net_worth",
    "compute_net_worth_summary",
    "total_of",
    "format_currency",
    "format_delta",
    "format_delta_with_percent",
    "format_percent",
    "format_summary",
    "build_trend_points",
    "filter_snapshots_by_range",
    "range_start",
    "subtract_months",
    "validate_entry_form",
]
