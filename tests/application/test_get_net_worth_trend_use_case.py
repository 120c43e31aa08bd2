"""Tests for the GetNetWorthTrendUseCase."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_net_worth_trend import (
    GetNetWorthTrendUseCase,
)
from src.domain.models import NetWorthSnapshot, TimeRange


def _snapshot(snapshot_id: str, month: int, year: int = 2024):
    return NetWorthSnapshot(
        id=snapshot_id,
        user_id="user-1",
        assets=Decimal("1000"),
        liabilities=Decimal("100"),
        networth=Decimal(month * 100),
        created_at=datetime(year, month, 1, tzinfo=timezone.utc),
    )


def _use_case(snapshots) -> GetNetWorthTrendUseCase:
    repository = MagicMock()
    repository.list_snapshots.return_value = snapshots
    return GetNetWorthTrendUseCase(
        repository,
        clock=lambda: datetime(2024, 9, 15, tzinfo=timezone.utc),
        logger=MagicMock(),
    )


def test_execute_filters_range_and_builds_points() -> None:
    """Snapshots stay newest first while points run oldest first."""
    snapshots = [
        _snapshot("sep", 9),
        _snapshot("may", 5),
        _snapshot("jan", 1),
        _snapshot("old", 6, year=2022),
    ]

    trend = _use_case(snapshots).execute("user-1", TimeRange.SIX_MONTHS)

    assert trend.time_range is TimeRange.SIX_MONTHS
    assert [snapshot.id for snapshot in trend.snapshots] == ["sep", "may"]
    assert [point.date_label for point in trend.points] == [
        "May 2024",
        "Sep 2024",
    ]
    assert trend.latest.id == "sep"


def test_execute_all_keeps_everything() -> None:
    snapshots = [_snapshot("sep", 9), _snapshot("old", 6, year=2022)]

    trend = _use_case(snapshots).execute("user-1")

    assert len(trend.snapshots) == 2
    assert len(trend.points) == 2


def test_execute_without_snapshots() -> None:
    """An empty history has no latest snapshot."""
    trend = _use_case([]).execute("user-1", TimeRange.ONE_YEAR)

    assert trend.snapshots == []
    assert trend.points == []
    assert trend.latest is None
