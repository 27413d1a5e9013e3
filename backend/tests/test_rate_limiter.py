import asyncio

import pytest

from conftest import FakeClock
from sport_banter.utils.rate_limiter import RateLimiter


def make_limiter(clock: FakeClock, limit: int, window: float) -> RateLimiter:
    return RateLimiter(limit=limit, window_seconds=window, clock=clock, sleep=clock.sleep)


@pytest.mark.asyncio
async def test_first_request_is_admitted_immediately(clock):
    limiter = make_limiter(clock, limit=1, window=60.0)

    waited = await limiter.acquire()

    assert waited == 0.0
    assert limiter.timestamps == (0.0,)
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_second_request_waits_for_window_to_slide(clock):
    limiter = make_limiter(clock, limit=1, window=60.0)

    await limiter.acquire()
    clock.now = 1.0
    waited = await limiter.acquire()

    assert waited == pytest.approx(59.0)
    assert clock.now == pytest.approx(60.0)
    assert limiter.timestamps == (60.0,)


@pytest.mark.asyncio
async def test_requests_under_limit_do_not_wait(clock):
    limiter = make_limiter(clock, limit=3, window=10.0)

    for _ in range(3):
        assert await limiter.acquire() == 0.0

    assert len(limiter.timestamps) == 3
    assert limiter.stats.waits == 0


@pytest.mark.asyncio
async def test_sliding_window_never_exceeds_limit(clock):
    limit, window = 3, 10.0
    limiter = make_limiter(clock, limit=limit, window=window)
    admitted = []

    async def request(arrival: float):
        clock.now = max(clock.now, arrival)
        await limiter.acquire()
        admitted.append(clock.now)

    for arrival in [0.0, 0.5, 1.0, 2.0, 2.5, 9.0, 11.0, 11.5, 12.0, 30.0, 30.1, 30.2, 30.3]:
        await request(arrival)

    for t in admitted:
        in_window = [a for a in admitted if t - window < a <= t]
        assert len(in_window) <= limit


@pytest.mark.asyncio
async def test_concurrent_callers_are_admitted_in_arrival_order(clock):
    limiter = make_limiter(clock, limit=2, window=5.0)
    order = []

    async def caller(name: str):
        await limiter.acquire()
        order.append((name, clock.now))

    await asyncio.gather(*(caller(f"req{i}") for i in range(5)))

    assert [name for name, _ in order] == ["req0", "req1", "req2", "req3", "req4"]
    assert [t for _, t in order] == [0.0, 0.0, 5.0, 5.0, 10.0]


@pytest.mark.asyncio
async def test_stats_track_waits(clock):
    limiter = make_limiter(clock, limit=1, window=60.0)

    await limiter.acquire()
    clock.now = 20.0
    await limiter.acquire()

    stats = limiter.stats.to_dict()
    assert stats["total_requests"] == 2
    assert stats["waits"] == 1
    assert stats["last_wait_seconds"] == pytest.approx(40.0)


@pytest.mark.asyncio
async def test_reset_clears_window(clock):
    limiter = make_limiter(clock, limit=1, window=60.0)
    await limiter.acquire()

    limiter.reset()

    assert limiter.timestamps == ()
    assert await limiter.acquire() == 0.0


@pytest.mark.parametrize("limit, window", [(0, 60.0), (1, 0.0)])
def test_invalid_configuration_is_rejected(limit, window):
    with pytest.raises(ValueError):
        RateLimiter(limit=limit, window_seconds=window)
