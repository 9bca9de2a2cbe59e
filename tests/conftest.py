"""Pytest fixtures for volunteer-finder tests."""

import json
from typing import Callable

import httpx
import pytest

from volunteer_finder.cache import ResponseCache
from volunteer_finder.config import Settings
from volunteer_finder.fetcher import CachedFetcher

Handler = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload), headers={"content-type": "application/json"})


def make_opportunity(title: str, organization: str, **extra) -> dict:
    data = {
        "id": f"{title}-{organization}".lower().replace(" ", "-"),
        "title": title,
        "organization": organization,
        "category": "education",
        "description": f"{title} with {organization}",
        "date": "2026-11-01",
        "location": "Arlington, VA",
        "contact": "volunteer@example.org",
    }
    data.update(extra)
    return data


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    """Settings with every source key configured."""
    return Settings(
        volunteer_match_api_key="vm-key",
        justserve_api_key="js-key",
        united_way_api_key="uw-key",
    )


@pytest.fixture
def make_fetcher(clock: FakeClock):
    """Build a CachedFetcher over a recording mock transport and the fake clock."""

    def _make(handler: Handler) -> tuple[CachedFetcher, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        return CachedFetcher(client, ResponseCache(clock=clock)), transport

    return _make
