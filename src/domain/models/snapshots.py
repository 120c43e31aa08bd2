"""Domain models for net worth snapshots and trends."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class SnapshotTotals:
    """Aggregate figures handed to the snapshot recorder."""

    assets: Decimal
    liabilities: Decimal
    networth: Decimal


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Immutable point-in-time record of a user's totals.

    ``networth`` equals ``assets - liabilities`` as computed when the snapshot
    was taken; later edits to entries do not touch existing snapshots.
    """

    id: str
    user_id: str
    assets: Decimal
    liabilities: Decimal
    networth: Decimal
    created_at: datetime


@dataclass(frozen=True)
class TrendPoint:
    """Chart-ready net worth value for one snapshot."""

    date_label: str
    value: Decimal
    created_at: datetime


class TimeRange(str, Enum):
    """Trend chart ranges, expressed in calendar months."""

    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    TWO_YEARS = "2Y"
    ALL = "All"

    @property
    def months(self) -> int | None:
        return _RANGE_MONTHS[self]


_RANGE_MONTHS = {
    TimeRange.SIX_MONTHS: 6,
    TimeRange.ONE_YEAR: 12,
    TimeRange.TWO_YEARS: 24,
    TimeRange.ALL: None,
}


__all__ = [
    "SnapshotTotals",
    "NetWorthSnapshot",
    "TrendPoint",
    "TimeRange",
]
