"""Port for the append-only net worth snapshot log."""

from typing import Protocol

from src.domain.models import NetWorthSnapshot, SnapshotTotals


class SnapshotsRepositoryPort(Protocol):
    """Port exposing append and read access to snapshots."""

    def create_snapshot(
        self,
        user_id: str,
        totals: SnapshotTotals,
    ) -> NetWorthSnapshot:
        """Append one snapshot row for the user."""

    def list_snapshots(self, user_id: str) -> list[NetWorthSnapshot]:
        """Return every snapshot of the user, newest first."""


__all__ = ["SnapshotsRepositoryPort"]
