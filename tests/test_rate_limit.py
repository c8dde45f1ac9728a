from app.core.rate_limit import LoginAttemptTracker


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def make_tracker(clock):
    return LoginAttemptTracker(max_attempts=3, lockout_seconds=300, clock=clock)


def test_failures_count_down_remaining_attempts():
    tracker = make_tracker(FakeClock())
    assert tracker.register_failure("1.2.3.4").remaining_attempts == 2
    assert tracker.register_failure("1.2.3.4").remaining_attempts == 1
    assert tracker.check("1.2.3.4") is None


def test_lock_after_max_attempts():
    clock = FakeClock()
    tracker = make_tracker(clock)
    for _ in range(2):
        tracker.register_failure("ip")
    result = tracker.register_failure("ip")

    assert result.locked
    assert result.remaining_attempts == 0
    assert result.locked_until == clock.now + 300
    assert tracker.check("ip") == result.locked_until
    assert tracker.minutes_until(result.locked_until) == 5


def test_lock_expires_and_counting_restarts():
    clock = FakeClock()
    tracker = make_tracker(clock)
    for _ in range(3):
        tracker.register_failure("ip")

    clock.now += 301
    assert tracker.check("ip") is None
    result = tracker.register_failure("ip")
    assert not result.locked
    assert result.remaining_attempts == 2


def test_keys_are_independent():
    tracker = make_tracker(FakeClock())
    for _ in range(3):
        tracker.register_failure("a")
    assert tracker.check("a") is not None
    assert tracker.check("b") is None


def test_reset_clears_state():
    tracker = make_tracker(FakeClock())
    for _ in range(3):
        tracker.register_failure("a")
    tracker.reset("a")
    assert tracker.check("a") is None


def test_minutes_until_rounds_up_with_floor_of_one():
    clock = FakeClock()
    tracker = make_tracker(clock)
    assert tracker.minutes_until(clock.now + 61) == 2
    assert tracker.minutes_until(clock.now + 1) == 1
    assert tracker.minutes_until(clock.now - 10) == 1
