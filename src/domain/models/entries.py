"""Domain models for balance sheet entries (assets and liabilities)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar


class EntryKind(str, Enum):
    """Side of the balance sheet an entry belongs to."""

    ASSET = "asset"
    LIABILITY = "liability"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def plural_label(self) -> str:
        return "Assets" if self is EntryKind.ASSET else "Liabilities"


@dataclass(frozen=True)
class EntryDraft:
    """Validated user input for creating or updating an entry.

    Attributes:
        name: Display name, 1 to 100 characters.
        category: Free-form category, 1 to 50 characters.
        value: Non-negative amount.
        description: Optional note, at most 500 characters.
    """

    name: str
    category: str
    value: Decimal
    description: str | None = None


@dataclass(frozen=True)
class BalanceSheetEntry:
    """Persisted asset or liability owned by a single user."""

    kind: ClassVar[EntryKind]

    id: str
    user_id: str
    name: str
    category: str
    value: Decimal
    description: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Asset(BalanceSheetEntry):
    """Owned resource counted toward total assets."""

    kind: ClassVar[EntryKind] = EntryKind.ASSET


@dataclass(frozen=True)
class Liability(BalanceSheetEntry):
    """Debt or obligation subtracted from total assets."""

    kind: ClassVar[EntryKind] = EntryKind.LIABILITY


ENTRY_TYPES: dict[EntryKind, type[BalanceSheetEntry]] = {
    EntryKind.ASSET: Asset,
    EntryKind.LIABILITY: Liability,
}


__all__ = [
    "EntryKind",
    "EntryDraft",
    "BalanceSheetEntry",
    "Asset",
    "Liability",
    "ENTRY_TYPES",
]
