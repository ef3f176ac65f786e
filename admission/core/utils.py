"""Small utilities."""

from __future__ import annotations

import math


def whole_tokens(elapsed: float, rate: float) -> int:
    """Tokens earned over ``elapsed`` seconds, truncated down.

    Negative elapsed time earns nothing.
    """
    if elapsed <= 0:
        return 0
    return int(math.floor(elapsed * rate))


def is_positive_real(x) -> bool:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    return math.isfinite(x) and x > 0
