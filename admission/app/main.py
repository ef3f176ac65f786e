"""Bootstrap a limiter from settings."""

from __future__ import annotations

from ..core.clock import MonotonicClock, WallClock
from ..limiter.bucket import TokenBucketLimiter
from .config import LimiterSettings


def build_limiter(settings: LimiterSettings | None = None, clock=None) -> TokenBucketLimiter:
    settings = settings or LimiterSettings.from_env()
    if clock is None:
        clock = WallClock() if settings.clock == "wall" else MonotonicClock()
    return TokenBucketLimiter(
        capacity=settings.capacity,
        refill_rate=settings.refill_rate,
        clock=clock,
        carry_fraction=settings.carry_fraction,
    )
