"""Interval timer that fires a callback every N milliseconds."""
from __future__ import annotations

import logging
from typing import Callable

from glide_schedule.scheduler import Handle, Scheduler, ThreadScheduler

logger = logging.getLogger(__name__)


class Timer:
    """Repeating timer. Owns at most one scheduled repetition at a time.

    ``remaining_time`` is the phase within the current interval, measured
    from the last ``start()``. It does not account for scheduler drift, so
    after many fires it can disagree with when the callback actually runs.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval: float,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        _check_interval(interval)
        self._callback = callback
        self._interval = interval
        self._scheduler: Scheduler = scheduler if scheduler is not None else ThreadScheduler()
        self._handle: Handle | None = None
        self._running = False
        self._start_time = 0.0

    @property
    def callback(self) -> Callable[[], None]:
        return self._callback

    @property
    def interval(self) -> float:
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        # Used by the next start(); the live repetition keeps its interval.
        _check_interval(value)
        self._interval = value

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    # --- Control ---

    def start(self) -> None:
        """(Re)start the timer. Any previous repetition is cancelled first."""
        self._cancel()
        self._start_time = self._scheduler.clock.now()
        self._handle = self._scheduler.schedule(self._callback, self._interval)
        self._running = True
        logger.debug(f"Timer started, interval={self._interval}ms")

    def stop(self) -> None:
        self._cancel()
        self._running = False
        logger.debug("Timer stopped")

    def _cancel(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None

    # --- State ---

    @property
    def is_running(self) -> bool:
        """Whether the timer is running. Assigning sets the raw flag only."""
        return self._running

    @is_running.setter
    def is_running(self, value: bool) -> None:
        self._running = bool(value)

    # --- Time ---

    @property
    def elapsed_time(self) -> float:
        """Milliseconds since the last ``start()``, or 0 when stopped."""
        if not self._running:
            return 0
        return self._scheduler.clock.now() - self._start_time

    @property
    def remaining_time(self) -> float:
        """Milliseconds to the next interval boundary, in ``[0, interval)``.

        Exactly on a boundary the next fire is due now and this is 0.
        Returns 0 when stopped.
        """
        if not self._running:
            return 0
        phase = self.elapsed_time % self._interval
        if phase == 0:
            return 0
        return max(0, self._interval - phase)


def _check_interval(interval: float) -> None:
    if interval <= 0:
        raise ValueError("interval must be positive")
