"""
Shared fixtures and fakes for the banter pipeline tests.

Time is faked: FakeClock.sleep advances the clock instead of waiting, so
backoff and rate limiter timing can be asserted exactly.
"""

import json
from datetime import date
from types import SimpleNamespace
from typing import Any, List

import httpx
import pytest

from sport_banter.generation import GenerationClient
from sport_banter.sports_api import MatchDataFetcher, SportsDBClient
from sport_banter.teams import DateResolver, TargetResolver, TeamRegistry
from sport_banter.utils.rate_limiter import RateLimiter

FIXED_TODAY = date(2024, 5, 9)


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeModels:
    """Stands in for genai.Client().aio.models; replays scripted outcomes."""

    def __init__(self, outcomes: List[Any]):
        self.outcomes = list(outcomes)
        self.prompts: List[str] = []

    async def generate_content(self, model: str, contents: str):
        self.prompts.append(contents)
        if not self.outcomes:
            raise AssertionError("Unexpected extra Gemini call")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return SimpleNamespace(text=outcome)


def make_gemini(outcomes: List[Any]) -> SimpleNamespace:
    return SimpleNamespace(aio=SimpleNamespace(models=FakeModels(outcomes)))


class SportsDBStub:
    """httpx handler serving canned eventslast.php bodies and counting calls."""

    def __init__(self, body: Any = None, status_code: int = 200, error: Exception = None):
        self.body = body if body is not None else {"results": []}
        self.status_code = status_code
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=json.dumps(self.body))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


SAMPLE_RESULTS = {
    "results": [
        {
            "strEvent": "Liverpool vs Tottenham",
            "intHomeScore": "4",
            "intAwayScore": "2",
            "dateEvent": "2024-05-08",
        },
        {
            "strEvent": "West Ham vs Liverpool",
            "intHomeScore": "2",
            "intAwayScore": "2",
            "dateEvent": "2024-05-01",
        },
    ]
}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry() -> TeamRegistry:
    return TeamRegistry({"Liverpool": "133602", "Chelsea": "133610"})


@pytest.fixture
def target_resolver(registry) -> TargetResolver:
    return TargetResolver(registry, DateResolver(today=lambda: FIXED_TODAY))


@pytest.fixture
def rate_limiter(clock) -> RateLimiter:
    return RateLimiter(limit=100, window_seconds=60.0, clock=clock, sleep=clock.sleep)


@pytest.fixture
def sportsdb() -> SportsDBStub:
    return SportsDBStub(SAMPLE_RESULTS)


@pytest.fixture
def match_fetcher(sportsdb, registry) -> MatchDataFetcher:
    client = SportsDBClient(api_key="1", transport=sportsdb.transport)
    return MatchDataFetcher(client, registry)


@pytest.fixture
def generation_factory(rate_limiter, clock):
    """Build a GenerationClient whose Gemini calls replay `outcomes`."""
    def factory(outcomes: List[Any], max_retries: int = 3) -> GenerationClient:
        return GenerationClient(
            rate_limiter=rate_limiter,
            client=make_gemini(outcomes),
            max_retries=max_retries,
            sleep=clock.sleep,
        )
    return factory
