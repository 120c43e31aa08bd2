"""Use cases recording net worth snapshots.

Taking a snapshot reads the current assets and liabilities, aggregates them
and appends one snapshot row. The read and the write are two separate steps
with no transaction around them.
"""

from src.application.errors import PersistenceError
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.ports.snapshots_repository import SnapshotsRepositoryPort
from src.application.results import ActionResult
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import NetWorthSnapshot, SnapshotTotals
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


SNAPSHOT_FAILURE_MESSAGE = "Failed to create snapshot"


class SnapshotRecorder:
    """Persist aggregate totals as a new snapshot row."""

    def __init__(
        self,
        repository: SnapshotsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the recorder.

        Args:
            repository: Append-only snapshot repository.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def record(
        self,
        user_id: str,
        totals: SnapshotTotals,
    ) -> NetWorthSnapshot:
        """Append the totals as given, including the derived net worth.

        Args:
            user_id: Owner of the snapshot.
            totals: Aggregated assets, liabilities and net worth.

        Returns:
            NetWorthSnapshot: The stored snapshot.

        Raises:
            PersistenceError: With a generic message when the insert fails.
        """
        try:
            return self._repository.create_snapshot(user_id, totals)
        except PersistenceError as exc:
            self._logger.error(f"{SNAPSHOT_FAILURE_MESSAGE}: {exc}")
            raise PersistenceError(SNAPSHOT_FAILURE_MESSAGE) from exc


class TakeSnapshotUseCase:
    """Snapshot the user's current totals."""

    def __init__(
        self,
        assets_repository: EntriesRepositoryPort,
        liabilities_repository: EntriesRepositoryPort,
        recorder: SnapshotRecorder,
        currency_code: str = DEFAULT_CURRENCY,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Repository for the assets table.
            liabilities_repository: Repository for the liabilities table.
            recorder: Recorder appending the snapshot row.
            currency_code: Currency used for the summary.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving user action records.
        """
        self._assets_repository = assets_repository
        self._liabilities_repository = liabilities_repository
        self._recorder = recorder
        self._currency_code = currency_code
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, user_id: str) -> ActionResult:
        """Read current totals and append a snapshot.

        Args:
            user_id: Owner of the entries and the snapshot.

        Returns:
            ActionResult: Success flag only; no snapshot payload.
        """
        try:
            assets = self._assets_repository.list_entries(user_id)
            liabilities = self._liabilities_repository.list_entries(user_id)
            summary = compute_net_worth_summary(
                assets,
                liabilities,
                currency_code=self._currency_code,
            )
            snapshot = self._recorder.record(
                user_id,
                summary.to_snapshot_totals(),
            )
        except PersistenceError as exc:
            self._logger.error(f"{SNAPSHOT_FAILURE_MESSAGE}: {exc}")
            return ActionResult.failed(SNAPSHOT_FAILURE_MESSAGE)

        self._usage_logger.info(
            f"user={user_id} took snapshot id={snapshot.id} "
            f"networth={snapshot.networth}"
        )
        return ActionResult.ok()


__all__ = [
    "SNAPSHOT_FAILURE_MESSAGE",
    "SnapshotRecorder",
    "TakeSnapshotUseCase",
]
