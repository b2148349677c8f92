from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant for lead-time rules."""

    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        ...


class SystemClock:
    """Wall-clock implementation."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock frozen at a given instant, for tests and replays."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        """Move the frozen instant forward (or back, with a negative delta)."""
        self._instant += delta


_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """FastAPI dependency for the clock."""
    return _clock


def set_clock(clock: Clock) -> None:
    """Override the clock (for testing)."""
    global _clock
    _clock = clock
