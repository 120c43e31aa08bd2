"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from .entries import Asset, Liability
from .snapshots import SnapshotTotals


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset values.
        liability_total: Sum of liability values.
        net_worth: Assets minus liabilities, possibly negative.
        currency_code: Currency used for display.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str

    def to_snapshot_totals(self) -> SnapshotTotals:
        """Return the figures in the shape persisted by snapshots."""
        return SnapshotTotals(
            assets=self.asset_total,
            liabilities=self.liability_total,
            networth=self.net_worth,
        )


@dataclass(frozen=True)
class AssetCategoryAmount:
    """Amount and share of total assets for a given category."""

    category: str
    amount: Decimal
    share: Decimal = Decimal("0")


@dataclass(frozen=True)
class AssetCategoryBreakdown:
    """Breakdown of asset amounts by category."""

    currency_code: str
    categories: list[AssetCategoryAmount]


@dataclass(frozen=True)
class NetWorthOverview:
    """Everything the dashboard renders from one read of a user's entries."""

    summary: NetWorthSummary
    breakdown: AssetCategoryBreakdown
    assets: list[Asset] = field(default_factory=list)
    liabilities: list[Liability] = field(default_factory=list)


__all__ = [
    "NetWorthSummary",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "NetWorthOverview",
]
