"""Millisecond clocks shared by animators and timers."""

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def now(self) -> float:
        """Current reading in milliseconds."""
        ...


class MonotonicClock:
    """Wall clock backed by time.monotonic(), reported in milliseconds."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to. For tests and hosts that own time."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError("clock cannot move backwards")
        self._now = float(ms)

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("advance must be non-negative")
        self._now += ms
        return self._now
