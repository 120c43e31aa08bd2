"""Helpers for timezone-aware timestamps."""

from datetime import datetime, timedelta, timezone
from typing import Callable


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC.

    Naive values are assumed to already be in UTC, which is how SQLite hands
    back timestamps written by the repositories.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class IncreasingClock:
    """Wrap a clock so successive readings are strictly increasing.

    Rows are listed newest first by ``created_at``; two inserts within the
    same clock tick would otherwise share a timestamp. A repeated or earlier
    reading is moved one microsecond past the previous one.
    """

    _TICK = timedelta(microseconds=1)

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._last: datetime | None = None

    def __call__(self) -> datetime:
        now = as_utc(self._clock())
        if self._last is not None and now <= self._last:
            now = self._last + self._TICK
        self._last = now
        return now


__all__ = ["utc_now", "as_utc", "IncreasingClock"]
