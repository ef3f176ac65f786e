"""Clock sources the limiter reads elapsed time from."""

from __future__ import annotations

import threading
import time


class MonotonicClock:
    """Default clock; immune to NTP and wall-clock adjustments."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float):
        time.sleep(max(0.0, seconds))


class WallClock(MonotonicClock):
    """Epoch seconds. Can jump backwards, the limiter clamps that."""

    def now(self) -> float:
        return time.time()


class ManualClock:
    """Clock driven by hand, for tests and simulations.

    ``set`` may move time backwards to emulate clock skew.
    """

    def __init__(self, start: float = 0.0):
        self._t = float(start)
        self._lock = threading.Lock()

    def now(self) -> float:
        with self._lock:
            return self._t

    def advance(self, seconds: float) -> float:
        with self._lock:
            self._t += seconds
            return self._t

    def set(self, t: float):
        with self._lock:
            self._t = float(t)

    def sleep(self, seconds: float):
        self.advance(max(0.0, seconds))
