"""Elapsed-time sources used by the controller.

The controller only needs start/stop/elapsed semantics, so any object with
those three methods can be injected. ``StopwatchTimer`` wraps a clock
callable (``time.monotonic`` by default); ``ManualClock`` is a clock that only
moves when told to, for simulations and tests.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol


class Timer(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...

    def elapsed(self) -> float: ...


class ManualClock:
    """Clock whose time is advanced explicitly."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f"Cannot advance clock by negative time: {seconds}")
        self._now += float(seconds)
        return self._now

    def set(self, value: float) -> None:
        self._now = float(value)


class StopwatchTimer:
    """Start/stop timer over a clock callable returning seconds.

    ``elapsed()`` is the time since the last ``start()`` while running, and the
    frozen interval between ``start()`` and ``stop()`` once stopped. Before the
    first ``start()`` it is ``0.0``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._started_at = self._clock()
        self._stopped_at = None
        self._running = True

    def stop(self) -> None:
        if not self._running:
            return
        self._stopped_at = self._clock()
        self._running = False

    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._clock() if self._running else self._stopped_at
        # clock may be rewound (ManualClock.set)
        return max(0.0, end - self._started_at)
