"""Pytest fixtures: a fake Clash of Clans API served through httpx.MockTransport."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Make the server's top-level packages importable regardless of rootdir
sys.path.insert(0, str(Path(__file__).parent))

from utils.cache import TTLCache
from utils.client import ClashClient

API_BASE = "https://api.test/v1"


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeClashApi:
    """
    Canned API responses keyed by request path (query string included).

    Unknown paths answer 404 with the API's notFound body. Every request
    path is recorded in order in `requests`.
    """

    def __init__(self):
        self.responses = {}
        self.broken = set()
        self.requests = []
        self.headers = []

    def add(self, path: str, body, status: int = 200) -> None:
        self.responses[path] = (status, body)

    def break_connection(self, path: str) -> None:
        self.broken.add(path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.raw_path.decode()
        if path.startswith("/v1"):
            path = path[len("/v1"):]
        self.requests.append(path)
        self.headers.append(request.headers)
        if path in self.broken:
            raise httpx.ConnectError("Connection refused", request=request)
        if path not in self.responses:
            return httpx.Response(404, json={"reason": "notFound"})
        status, body = self.responses[path]
        return httpx.Response(
            status,
            content=json.dumps(body).encode(),
            headers={"content-type": "application/json"},
        )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(ttl=300, clock=clock)


@pytest.fixture
def api():
    return FakeClashApi()


@pytest.fixture
def client(api, cache):
    return ClashClient(
        "test-key",
        cache,
        base_url=API_BASE,
        transport=httpx.MockTransport(api.handler),
    )
