import pytest

from admission import ManualClock, TokenBucketLimiter

prometheus_client = pytest.importorskip("prometheus_client")


def _count(outcome):
    value = prometheus_client.REGISTRY.get_sample_value(
        "admission_decisions_total", {"outcome": outcome}
    )
    return value or 0.0


def test_decisions_are_counted():
    admitted, rejected = _count("admitted"), _count("rejected")
    limiter = TokenBucketLimiter(2, 1.0, clock=ManualClock())
    for _ in range(3):
        limiter.try_consume(1)
    assert _count("admitted") - admitted == 2
    assert _count("rejected") - rejected == 1
