from datetime import date

from petition_api.services.rate_limit import DailyRateLimiter


def test_new_client_has_full_quota(limiter):
    status = limiter.check("1.2.3.4")
    assert status.allowed is True
    assert status.used == 0
    assert status.remaining == 3
    assert status.limit == 3


def test_check_does_not_consume(limiter):
    for _ in range(10):
        limiter.check("1.2.3.4")
    assert limiter.check("1.2.3.4").used == 0


def test_blocks_after_limit(limiter):
    for _ in range(3):
        assert limiter.check("1.2.3.4").allowed
        limiter.increment("1.2.3.4")

    status = limiter.check("1.2.3.4")
    assert status.allowed is False
    assert status.used == 3
    assert status.remaining == 0


def test_used_plus_remaining_equals_limit(limiter):
    for _ in range(3):
        status = limiter.check("1.2.3.4")
        assert status.used + status.remaining == status.limit
        limiter.increment("1.2.3.4")


def test_remaining_never_negative(clock):
    limiter = DailyRateLimiter(limit=1, today=clock)
    for _ in range(3):
        limiter.increment("1.2.3.4")

    status = limiter.check("1.2.3.4")
    assert status.used == 3
    assert status.remaining == 0


def test_clients_are_independent(limiter):
    for _ in range(3):
        limiter.increment("1.2.3.4")

    assert limiter.check("1.2.3.4").allowed is False
    assert limiter.check("5.6.7.8").allowed is True


def test_day_rollover_resets_and_sweeps(limiter, clock):
    for _ in range(3):
        limiter.increment("1.2.3.4")
    limiter.increment("5.6.7.8")
    assert len(limiter) == 2

    clock.day = date(2024, 3, 2)
    status = limiter.check("1.2.3.4")

    assert status.allowed is True
    assert status.used == 0
    assert len(limiter) == 0


def test_previous_day_counts_are_ignored(limiter, clock):
    for _ in range(3):
        limiter.increment("1.2.3.4")
    clock.day = date(2024, 3, 2)
    limiter.increment("1.2.3.4")

    status = limiter.check("1.2.3.4")
    assert status.used == 1
    assert len(limiter) == 1


def test_reset(limiter):
    limiter.increment("1.2.3.4")
    limiter.reset()
    assert limiter.check("1.2.3.4").used == 0
