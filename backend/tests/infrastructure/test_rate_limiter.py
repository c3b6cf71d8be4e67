"""Sliding-window rate limiter - budget per key, window expiry, retry hints."""

import pytest

from zodiac_api.infrastructure.rate_limiter import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


async def test_allows_up_to_max_requests():
    limiter = SlidingWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())
    decisions = [await limiter.hit("1.2.3.4") for _ in range(3)]
    assert all(d.allowed for d in decisions)
    assert [d.remaining for d in decisions] == [2, 1, 0]


async def test_rejects_over_budget_with_retry_after():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)
    await limiter.hit("a")
    clock.now += 10
    await limiter.hit("a")
    decision = await limiter.hit("a")
    assert not decision.allowed
    assert decision.retry_after_seconds == 50


async def test_window_slides():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert (await limiter.hit("a")).allowed
    assert not (await limiter.hit("a")).allowed
    clock.now += 60
    assert (await limiter.hit("a")).allowed


async def test_rejected_requests_are_not_recorded():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    await limiter.hit("a")
    for _ in range(5):
        clock.now += 1
        await limiter.hit("a")
    clock.now = 1060.0
    assert (await limiter.hit("a")).allowed


async def test_keys_are_independent():
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert (await limiter.hit("a")).allowed
    assert (await limiter.hit("b")).allowed
    assert not (await limiter.hit("a")).allowed


def test_max_requests_must_be_positive():
    with pytest.raises(ValueError):
        SlidingWindowRateLimiter(max_requests=0)


async def test_idle_keys_are_swept_after_a_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=5, window_seconds=60, clock=clock)
    for i in range(1000):
        await limiter.hit(f"10.0.{i // 256}.{i % 256}")
    assert len(limiter._requests) == 1000

    clock.now += 60
    await limiter.hit("fresh")
    assert list(limiter._requests) == ["fresh"]


async def test_sweep_keeps_keys_still_inside_the_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    await limiter.hit("old")
    clock.now += 30
    await limiter.hit("recent")
    clock.now += 30
    await limiter.hit("new")
    assert set(limiter._requests) == {"recent", "new"}
    assert not (await limiter.hit("recent")).allowed


async def test_budget_returns_after_idle_key_is_swept():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    await limiter.hit("a")
    clock.now += 120
    decision = await limiter.hit("a")
    assert decision.allowed
    assert decision.remaining == 0
