"""Metrics instrumentation for admission decisions."""

from __future__ import annotations

from typing import Any, Optional

try:  # pragma: no cover - optional dependency
    from prometheus_client import Counter as _PromCounter
except ImportError:  # pragma: no cover
    _PromCounter = None  # type: ignore

decisions_total: Optional[Any]
if _PromCounter is not None:
    decisions_total = _PromCounter(
        "admission_decisions_total", "Token bucket decisions", ["outcome"]
    )
else:
    decisions_total = None


def record_decision(admitted: bool, n: int = 1) -> None:
    if decisions_total is not None:
        decisions_total.labels(outcome="admitted" if admitted else "rejected").inc(n)
