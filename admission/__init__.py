"""Token-bucket admission control."""

from .core.clock import ManualClock, MonotonicClock, WallClock
from .limiter.bucket import BucketSnapshot, TokenBucketLimiter

__all__ = [
    "BucketSnapshot",
    "ManualClock",
    "MonotonicClock",
    "TokenBucketLimiter",
    "WallClock",
]
