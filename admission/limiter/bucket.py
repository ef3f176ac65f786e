"""Thread-safe token bucket limiter.

A bucket holds up to ``capacity`` whole tokens and earns ``refill_rate`` tokens
per second of elapsed clock time. Every :meth:`TokenBucketLimiter.try_consume`
call refills first, then admits the request if enough tokens are left.

Accrual is truncated to whole tokens and the time baseline is reset on every
call, so a fractional remainder is dropped each refill. A caller polling
faster than ``1 / refill_rate`` seconds therefore never earns a token. Pass
``carry_fraction=True`` to keep the remainder between calls instead.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from ..core.clock import MonotonicClock
from ..core.utils import is_positive_real, whole_tokens
from ..io.metrics import record_decision


class Clock(Protocol):
    def now(self) -> float: ...


@dataclass(frozen=True)
class BucketSnapshot:
    capacity: int
    refill_rate: float
    available_tokens: int
    last_refill_instant: float


class TokenBucketLimiter:
    def __init__(
        self,
        capacity: int,
        refill_rate: float,
        clock: Clock | None = None,
        carry_fraction: bool = False,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        if not is_positive_real(refill_rate):
            raise ValueError(f"refill_rate must be a positive number, got {refill_rate!r}")
        self._capacity = capacity
        self._rate = float(refill_rate)
        self._clock = clock or MonotonicClock()
        self._carry = carry_fraction
        self._lock = threading.Lock()
        # guarded by _lock
        self._tokens = capacity
        self._fraction = 0.0
        self._last = self._clock.now()
        logger.debug(
            "token bucket created capacity={} rate={}/s carry_fraction={}",
            capacity,
            self._rate,
            carry_fraction,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._rate

    @property
    def available_tokens(self) -> int:
        """Tokens left after the most recent call; does not refill."""
        with self._lock:
            return self._tokens

    @property
    def last_refill_instant(self) -> float:
        with self._lock:
            return self._last

    def snapshot(self) -> BucketSnapshot:
        with self._lock:
            return BucketSnapshot(self._capacity, self._rate, self._tokens, self._last)

    def try_consume(self, requested_tokens: int = 1) -> bool:
        """Refill, then debit ``requested_tokens`` if the bucket holds enough.

        Returns ``False`` without touching the count when it does not. Zero is a
        probe: it refills and is always admitted.
        """
        if (
            isinstance(requested_tokens, bool)
            or not isinstance(requested_tokens, int)
            or requested_tokens < 0
        ):
            raise ValueError(
                f"requested_tokens must be a non-negative integer, got {requested_tokens!r}"
            )
        with self._lock:
            skew = self._refill()
            admitted = self._tokens >= requested_tokens
            if admitted:
                self._tokens -= requested_tokens
            remaining = self._tokens
        if skew:
            logger.warning("clock moved backwards by {:.6f}s; treating as no time passed", skew)
        record_decision(admitted)
        if not admitted:
            logger.trace(
                "rejected request for {} tokens, {} available", requested_tokens, remaining
            )
        return admitted

    def _refill(self) -> float:
        """Caller holds _lock. Returns how far the clock stepped backwards."""
        now = self._clock.now()
        elapsed = now - self._last
        skew = 0.0
        if elapsed < 0:
            skew, elapsed = -elapsed, 0.0
        if self._carry:
            earned = elapsed * self._rate + self._fraction
            added = whole_tokens(earned, 1.0)
            self._fraction = earned - added
        else:
            added = whole_tokens(elapsed, self._rate)
        self._tokens = min(self._capacity, self._tokens + added)
        if self._tokens == self._capacity:
            self._fraction = 0.0
        self._last = max(self._last, now)
        return skew

    def __repr__(self) -> str:
        return (
            f"TokenBucketLimiter(capacity={self._capacity}, refill_rate={self._rate}, "
            f"available={self.available_tokens})"
        )
