"""Domain services for finance aggregates."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.models import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    NetWorthSummary,
)
from src.utils.decimal_utils import coerce_decimal


HUNDRED = Decimal("100")


def _record_value(record) -> Decimal:
    if isinstance(record, Mapping):
        return coerce_decimal(record.get("value"))
    return coerce_decimal(record.value)


def _record_category(record) -> str:
    if isinstance(record, Mapping):
        return record["category"]
    return record.category


def total_of(records: Iterable) -> Decimal:
    """Sum the ``value`` of each record.

    Args:
        records: Entries or mappings exposing a decimal-like ``value``.

    Returns:
        Decimal: The total, or zero for an empty input.
    """
    return sum((_record_value(record) for record in records), Decimal("0"))


def compute_net_worth(total_assets, total_liabilities) -> Decimal:
    """Return assets minus liabilities without clamping."""
    return coerce_decimal(total_assets) - coerce_decimal(total_liabilities)


def compute_allocation(assets: Iterable) -> dict[str, Decimal]:
    """Return the percentage of total asset value held in each category.

    Categories are case-sensitive. When the total is zero the mapping is
    empty, so no division by zero can happen.

    Args:
        assets: Asset entries or mappings with ``category`` and ``value``.

    Returns:
        dict[str, Decimal]: Category to percentage of the grand total.
    """
    category_totals: dict[str, Decimal] = {}
    for asset in assets:
        category = _record_category(asset)
        category_totals[category] = (
            category_totals.get(category, Decimal("0")) + _record_value(asset)
        )

    grand_total = sum(category_totals.values(), Decimal("0"))
    if grand_total == 0:
        return {}
    return {
        category: (amount / grand_total) * HUNDRED
        for category, amount in category_totals.items()
    }


def compute_net_worth_summary(
    assets: Iterable,
    liabilities: Iterable,
    *,
    currency_code: str,
) -> NetWorthSummary:
    """Compute asset, liability and net worth totals.

    Args:
        assets: Asset entries.
        liabilities: Liability entries.
        currency_code: Currency used when the summary is displayed.

    Returns:
        NetWorthSummary: Computed totals.
    """
    asset_total = total_of(assets)
    liability_total = total_of(liabilities)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=compute_net_worth(asset_total, liability_total),
        currency_code=currency_code,
    )


def compute_asset_category_breakdown(
    assets: list,
    *,
    currency_code: str,
) -> AssetCategoryBreakdown:
    """Compute per-category asset amounts with their allocation share.

    Args:
        assets: Asset entries.
        currency_code: Currency used for display.

    Returns:
        AssetCategoryBreakdown: Categories sorted by amount, largest first.
    """
    shares = compute_allocation(assets)
    totals: dict[str, Decimal] = {}
    for asset in assets:
        category = _record_category(asset)
        totals[category] = totals.get(category, Decimal("0")) + _record_value(
            asset
        )

    categories = [
        AssetCategoryAmount(
            category=category,
            amount=amount,
            share=shares.get(category, Decimal("0")),
        )
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]
    return AssetCategoryBreakdown(
        currency_code=currency_code,
        categories=categories,
    )


__all__ = [
    "total_of",
    "compute_net_worth",
    "compute_allocation",
    "compute_net_worth_summary",
    "compute_asset_category_breakdown",
]
