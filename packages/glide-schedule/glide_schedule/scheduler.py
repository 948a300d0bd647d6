"""Schedulers: fire a callback every ``interval`` milliseconds until cancelled."""
from __future__ import annotations

import itertools
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from glide import Clock, ManualClock, MonotonicClock

logger = logging.getLogger(__name__)

Handle = int


@runtime_checkable
class Scheduler(Protocol):
    """Repeating-callback capability used by Timer.

    ``schedule`` returns a handle; ``cancel`` stops further fires for it.
    Cancelling an unknown or already-cancelled handle is a no-op.
    """

    @property
    def clock(self) -> Clock: ...

    def schedule(self, callback: Callable[[], None], interval: float) -> Handle: ...

    def cancel(self, handle: Handle) -> None: ...


@dataclass
class _Repetition:
    handle: Handle
    callback: Callable[[], None]
    interval: float
    next_due: float


class ManualScheduler:
    """Deterministic scheduler driven by explicit ``advance``/``advance_to`` calls.

    Fires happen synchronously inside ``advance_to`` with the clock set to
    each due time, in due order (ties in scheduling order). Exceptions from
    callbacks propagate to the caller.
    """

    def __init__(self, clock: ManualClock | None = None) -> None:
        self._clock = clock if clock is not None else ManualClock()
        self._repetitions: dict[Handle, _Repetition] = {}
        self._ids = itertools.count(1)

    @property
    def clock(self) -> ManualClock:
        return self._clock

    def schedule(self, callback: Callable[[], None], interval: float) -> Handle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = next(self._ids)
        self._repetitions[handle] = _Repetition(
            handle=handle,
            callback=callback,
            interval=interval,
            next_due=self._clock.now() + interval,
        )
        return handle

    def cancel(self, handle: Handle) -> None:
        self._repetitions.pop(handle, None)

    def pending(self) -> list[Handle]:
        """Handles that will fire again, in scheduling order."""
        return list(self._repetitions)

    def next_due(self) -> float | None:
        """Time of the earliest pending fire, or None if nothing is scheduled."""
        if not self._repetitions:
            return None
        return min(rep.next_due for rep in self._repetitions.values())

    def advance(self, ms: float) -> int:
        """Move time forward by ``ms``. Returns the number of fires."""
        return self.advance_to(self._clock.now() + ms)

    def advance_to(self, now: float) -> int:
        """Move time forward to ``now``, firing every repetition that comes due."""
        fired = 0
        while True:
            due = [rep for rep in self._repetitions.values() if rep.next_due <= now]
            if not due:
                break
            rep = min(due, key=lambda r: (r.next_due, r.handle))
            self._clock.set(max(rep.next_due, self._clock.now()))
            rep.next_due += rep.interval
            rep.callback()
            fired += 1
        self._clock.set(now)
        return fired


class ThreadScheduler:
    """Runs each repetition on its own daemon thread.

    Each thread sleeps until its next tick, fires, and measures the following
    tick from the moment the callback returns. Scheduling latency and callback
    time therefore accumulate as drift; this is not corrected.

    Callbacks run off the caller's thread. Hosts that touch shared animators
    from a callback must serialize that access themselves.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else MonotonicClock()
        self._stops: dict[Handle, threading.Event] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    @property
    def clock(self) -> Clock:
        return self._clock

    def schedule(self, callback: Callable[[], None], interval: float) -> Handle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        stop = threading.Event()
        with self._lock:
            handle = next(self._ids)
            self._stops[handle] = stop
        thread = threading.Thread(
            target=self._run,
            args=(handle, callback, interval / 1000.0, stop),
            name=f"glide-timer-{handle}",
            daemon=True,
        )
        thread.start()
        logger.debug(f"Scheduled repetition {handle} every {interval}ms")
        return handle

    def cancel(self, handle: Handle) -> None:
        with self._lock:
            stop = self._stops.pop(handle, None)
        if stop is not None:
            stop.set()
            logger.debug(f"Cancelled repetition {handle}")

    def shutdown(self) -> None:
        """Cancel every live repetition."""
        with self._lock:
            handles = list(self._stops)
        for handle in handles:
            self.cancel(handle)

    def _run(
        self,
        handle: Handle,
        callback: Callable[[], None],
        interval_s: float,
        stop: threading.Event,
    ) -> None:
        next_wake = time.monotonic() + interval_s
        while not stop.wait(max(0.0, next_wake - time.monotonic())):
            try:
                callback()
            except Exception:
                logger.exception(f"Timer callback for repetition {handle} raised")
            next_wake = time.monotonic() + interval_s
