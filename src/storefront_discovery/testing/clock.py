"""Testing – deterministic clocks."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from storefront_discovery.kernel.time import FrozenClock, to_millis


def FakeClock() -> FrozenClock:
    """Return a ``FrozenClock`` pinned to 2026-01-01 12:00 UTC."""
    return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


class StepClock:
    """A clock that advances by a fixed delta on every reading.

    Every history entry recorded against it gets a strictly larger timestamp,
    without sleeping in tests.

    Example::

        clock = StepClock(milliseconds=5)
        clock.millis()   # 1767225600000
        clock.millis()   # 1767225600005
    """

    def __init__(self, start: datetime | None = None, **step: int | float) -> None:
        self._current = start or datetime(2026, 1, 1, tzinfo=UTC)
        self._step = timedelta(**step) if step else timedelta(seconds=1)
        self.call_count = 0

    def now(self) -> datetime:
        value = self._current
        self._current += self._step
        self.call_count += 1
        return value

    def millis(self) -> int:
        return to_millis(self.now())

    def peek(self) -> datetime:
        """Return the next value :meth:`now` would return without advancing."""
        return self._current


__all__ = ["FakeClock", "StepClock"]
