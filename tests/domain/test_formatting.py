"""Tests for display formatting helpers."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.domain.services.formatting import (
    format_currency,
    format_delta,
    format_delta_with_percent,
    format_percent,
    format_summary,
)


@pytest.mark.parametrize(
    ("amount", "currency", "expected"),
    [
        (Decimal("600"), "USD", "$600.00"),
        (Decimal("-600"), "USD", "-$600.00"),
        (Decimal("1234567.891"), "USD", "$1,234,567.89"),
        (Decimal("1234.5"), "EUR", "1,234.50 €"),
        (Decimal("10"), "sek", "10.00 SEK"),
        (None, "USD", "$0.00"),
    ],
)
def test_format_currency(amount, currency, expected) -> None:
    """Amounts should render with symbol, separators and two decimals."""
    assert format_currency(amount, currency) == expected


def test_format_currency_rounds_half_even() -> None:
    """Half cents round to the even neighbour."""
    assert format_currency(Decimal("0.125")) == "$0.12"
    assert format_currency(Decimal("0.135")) == "$0.14"


def test_format_percent_and_delta() -> None:
    """Percent and delta helpers should sign and round values."""
    assert format_percent(Decimal("33.333")) == "33.3%"
    assert format_delta(Decimal("1500")) == "+1,500.00"
    assert format_delta(Decimal("-2.5")) == "-2.50"


def test_format_delta_with_percent() -> None:
    """Deltas include a percentage unless the baseline is zero."""
    assert format_delta_with_percent(Decimal("50"), Decimal("200")) == (
        "+50.00 (+25.00%)"
    )
    assert format_delta_with_percent(Decimal("-50"), Decimal("-200")) == (
        "-50.00 (-25.00%)"
    )
    assert format_delta_with_percent(Decimal("10"), Decimal("0")) == "+10.00"


def test_format_summary_formats_each_figure() -> None:
    summary = SimpleNamespace(
        asset_total=Decimal("1000"),
        liability_total=Decimal("400"),
        net_worth=Decimal("600"),
        currency_code="EUR",
    )

    assert format_summary(summary) == {
        "assets": "1,000.00 €",
        "liabilities": "400.00 €",
        "net_worth": "600.00 €",
    }
