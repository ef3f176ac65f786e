from loguru import logger

from admission import ManualClock, TokenBucketLimiter
from admission.core.logger import configure_logger


def test_backward_clock_is_logged():
    messages = []
    configure_logger("WARNING")
    sink = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        clock = ManualClock(start=10.0)
        limiter = TokenBucketLimiter(1, 1.0, clock=clock)
        clock.set(9.0)
        limiter.try_consume(1)
    finally:
        logger.remove(sink)
    assert any("clock moved backwards" in m for m in messages)


def test_backward_clock_warning_is_written_outside_the_lock():
    clock = ManualClock(start=10.0)
    limiter = TokenBucketLimiter(1, 1.0, clock=clock)
    held = []
    sink = logger.add(lambda m: held.append(limiter._lock.locked()), level="WARNING")
    try:
        clock.set(9.0)
        limiter.try_consume(1)
    finally:
        logger.remove(sink)
    assert held == [False]
