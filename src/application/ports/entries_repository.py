"""Port for persisting assets and liabilities."""

from typing import Protocol

from src.domain.models import BalanceSheetEntry, EntryDraft, EntryKind


class EntriesRepositoryPort(Protocol):
    """Port exposing CRUD access to one side of the balance sheet."""

    kind: EntryKind

    def list_entries(self, user_id: str) -> list[BalanceSheetEntry]:
        """Return the user's entries, newest first."""

    def get_entry(self, entry_id: str) -> BalanceSheetEntry | None:
        """Return a single entry or None when it does not exist."""

    def create_entry(
        self,
        user_id: str,
        draft: EntryDraft,
    ) -> BalanceSheetEntry:
        """Insert a new entry owned by the user."""

    def update_entry(
        self,
        user_id: str,
        entry_id: str,
        draft: EntryDraft,
    ) -> BalanceSheetEntry:
        """Overwrite the editable fields of an entry owned by the user."""

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        """Delete an entry owned by the user."""


__all__ = ["EntriesRepositoryPort"]
