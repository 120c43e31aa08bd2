"""Use case to read a user's snapshot history for the trend chart."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from src.application.ports.snapshots_repository import SnapshotsRepositoryPort
from src.domain.models import NetWorthSnapshot, TimeRange, TrendPoint
from src.domain.services.trends import (
    build_trend_points,
    filter_snapshots_by_range,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import utc_now


@dataclass(frozen=True)
class NetWorthTrend:
    """Snapshots inside the selected range and their chart points.

    Attributes:
        time_range: Range that was applied.
        snapshots: Snapshots in range, newest first.
        points: Chart points, oldest first.
    """

    time_range: TimeRange
    snapshots: list[NetWorthSnapshot]
    points: list[TrendPoint]

    @property
    def latest(self) -> NetWorthSnapshot | None:
        return self.snapshots[0] if self.snapshots else None


class GetNetWorthTrendUseCase:
    """Fetch snapshots newest first and filter them by calendar range."""

    def __init__(
        self,
        repository: SnapshotsRepositoryPort,
        clock: Callable[[], datetime] = utc_now,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Snapshot repository.
            clock: Callable returning the reference time for ranges.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        time_range: TimeRange = TimeRange.ALL,
    ) -> NetWorthTrend:
        """Return the snapshots and chart points for a range.

        Args:
            user_id: Owner of the snapshots.
            time_range: 6M, 1Y, 2Y or All.

        Returns:
            NetWorthTrend: Filtered snapshots and chart points.

        Raises:
            PersistenceError: If the repository read fails.
        """
        snapshots = self._repository.list_snapshots(user_id)
        in_range = filter_snapshots_by_range(
            snapshots,
            time_range,
            self._clock(),
        )
        self._logger.debug(
            f"Trend for user={user_id} range={time_range.value}: "
            f"{len(in_range)} of {len(snapshots)} snapshots"
        )
        return NetWorthTrend(
            time_range=time_range,
            snapshots=in_range,
            points=build_trend_points(in_range),
        )


__all__ = ["GetNetWorthTrendUseCase", "NetWorthTrend"]
