"""Domain constants for net worth tracking."""

DEFAULT_CURRENCY = "USD"

NAME_MAX_LENGTH = 100
CATEGORY_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500

# Monetary columns are stored as NUMERIC(14, 2).
MONEY_PRECISION = 14
MONEY_SCALE = 2

ASSET_CATEGORY_HINT = "e.g., Cash, Real Estate, Investments, Retirement"
LIABILITY_CATEGORY_HINT = "e.g., Mortgage, Credit Card, Student Loan"


__all__ = [
    "DEFAULT_CURRENCY",
    "NAME_MAX_LENGTH",
    "CATEGORY_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "MONEY_PRECISION",
    "MONEY_SCALE",
    "ASSET_CATEGORY_HINT",
    "LIABILITY_CATEGORY_HINT",
]
