from admission import ManualClock, MonotonicClock, WallClock


def test_manual_clock_advance_and_set():
    clock = ManualClock(start=1.0)
    assert clock.now() == 1.0
    assert clock.advance(2.5) == 3.5
    clock.set(0.5)
    assert clock.now() == 0.5


def test_manual_clock_sleep_ignores_negative():
    clock = ManualClock()
    clock.sleep(-3)
    assert clock.now() == 0.0
    clock.sleep(0.25)
    assert clock.now() == 0.25


def test_monotonic_clock_does_not_go_back():
    clock = MonotonicClock()
    a = clock.now()
    b = clock.now()
    assert b >= a


def test_wall_clock_is_epoch_seconds():
    assert WallClock().now() > 1_600_000_000
