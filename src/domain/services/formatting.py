"""Display formatting for monetary amounts."""

from decimal import ROUND_HALF_EVEN, Decimal

from src.domain.constants import DEFAULT_CURRENCY
from src.utils.decimal_utils import coerce_decimal


CENTS = Decimal("0.01")

# Symbol and whether it precedes the amount.
_CURRENCY_SYMBOLS = {
    "USD": ("$", True),
    "CAD": ("CA$", True),
    "AUD": ("A$", True),
    "GBP": ("£", True),
    "JPY": ("¥", True),
    "INR": ("₹", True),
    "EUR": ("€", False),
    "CHF": ("CHF", False),
}


def format_currency(amount, currency_code: str = DEFAULT_CURRENCY) -> str:
    """Format an amount as a currency string with two decimals.

    Args:
        amount: Decimal-like amount.
        currency_code: ISO currency code.

    Returns:
        str: e.g. ``$1,234.56``, ``-$600.00`` or ``1,234.56 €``.
    """
    value = coerce_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_EVEN)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol, prefix = _CURRENCY_SYMBOLS.get(
        currency_code.upper(),
        (currency_code.upper(), False),
    )
    if prefix:
        return f"{sign}{symbol}{digits}"
    return f"{sign}{digits} {symbol}"


def format_percent(value) -> str:
    """Format a percentage with one decimal place."""
    return f"{coerce_decimal(value):.1f}%"


def format_delta(value) -> str:
    """Format a signed change for metric deltas."""
    delta = coerce_decimal(value)
    sign = "+" if delta >= 0 else ""
    return f"{sign}{delta:,.2f}"


def format_delta_with_percent(delta, baseline) -> str:
    """Format a signed change with its percentage of the baseline."""
    delta_value = coerce_decimal(delta)
    baseline_value = coerce_decimal(baseline)
    if baseline_value == 0:
        return format_delta(delta_value)
    percent = (delta_value / abs(baseline_value)) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{format_delta(delta_value)} ({sign}{percent:.2f}%)"


def format_summary(summary) -> dict[str, str]:
    """Return display strings for the figures of a net worth summary.

    Args:
        summary: Object exposing asset_total, liability_total, net_worth and
            currency_code.

    Returns:
        dict[str, str]: Formatted ``assets``, ``liabilities`` and
        ``net_worth``.
    """
    return {
        "assets": format_currency(summary.asset_total, summary.currency_code),
        "liabilities": format_currency(
            summary.liability_total,
            summary.currency_code,
        ),
        "net_worth": format_currency(summary.net_worth, summary.currency_code),
    }


__all__ = [
    "format_currency",
    "format_percent",
    "format_delta",
    "format_delta_with_percent",
    "format_summary",
]
