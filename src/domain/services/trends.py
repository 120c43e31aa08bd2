"""Domain services for the net worth trend chart."""

import calendar
from collections.abc import Iterable
from datetime import datetime

from src.domain.models import NetWorthSnapshot, TimeRange, TrendPoint
from src.utils.decimal_utils import coerce_decimal
from src.utils.time_utils import as_utc


def subtract_months(moment: datetime, months: int) -> datetime:
    """Step back a number of calendar months.

    The day is clamped to the length of the target month, so March 31 minus
    one month lands on the last day of February.

    Args:
        moment: Starting point.
        months: Number of calendar months to go back.

    Returns:
        datetime: Same time of day, ``months`` calendar months earlier.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def range_start(time_range: TimeRange, now: datetime) -> datetime | None:
    """Return the earliest timestamp kept by a range, or None for All."""
    months = time_range.months
    if months is None:
        return None
    return subtract_months(as_utc(now), months)


def filter_snapshots_by_range(
    snapshots: Iterable[NetWorthSnapshot],
    time_range: TimeRange,
    now: datetime,
) -> list[NetWorthSnapshot]:
    """Keep snapshots taken on or after the start of the range.

    Args:
        snapshots: Snapshots in any order; the order is preserved.
        time_range: Selected chart range.
        now: Reference time for the range.

    Returns:
        list[NetWorthSnapshot]: Snapshots inside the range.
    """
    start = range_start(time_range, now)
    if start is None:
        return list(snapshots)
    return [
        snapshot
        for snapshot in snapshots
        if as_utc(snapshot.created_at) >= start
    ]


def format_trend_label(moment: datetime) -> str:
    """Return a short month label such as ``Mar 2024``."""
    return moment.strftime("%b %Y")


def build_trend_points(
    snapshots: Iterable[NetWorthSnapshot],
) -> list[TrendPoint]:
    """Convert snapshots into chart points, oldest first."""
    ordered = sorted(snapshots, key=lambda snapshot: as_utc(snapshot.created_at))
    return [
        TrendPoint(
            date_label=format_trend_label(snapshot.created_at),
            value=coerce_decimal(snapshot.networth),
            created_at=snapshot.created_at,
        )
        for snapshot in ordered
    ]


__all__ = [
    "subtract_months",
    "range_start",
    "filter_snapshots_by_range",
    "format_trend_label",
    "build_trend_points",
]
