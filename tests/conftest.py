"""
tests/conftest.py
=================
In-memory stand-ins for niquests.AsyncSession plus canned TVMaze payloads.
No test in this suite touches the network.
"""

import copy

import niquests
import pytest

BASE = "https://api.test"

BLETCHLEY_IMAGE = "http://static.tvmaze.com/uploads/images/medium_portrait/147/369403.jpg"

SEARCH_PAYLOAD = [
    {
        "score": 17.8,
        "show": {
            "id": 1767,
            "url": "https://www.tvmaze.com/shows/1767/the-bletchley-circle",
            "name": "The Bletchley Circle",
            "language": "English",
            "genres": ["Drama", "Crime"],
            "summary": "<p><b>The Bletchley Circle</b> follows the journey of four ordinary women.</p>",
            "image": {
                "medium": BLETCHLEY_IMAGE,
                "original": "http://static.tvmaze.com/uploads/images/original_untouched/147/369403.jpg",
            },
        },
    },
    {
        "score": 9.1,
        "show": {
            "id": 39749,
            "name": "The Bletchley Circle: San Francisco",
            "summary": None,
            "image": None,
        },
    },
]

EPISODES_SHOW_1 = [
    {"id": 1, "name": "Pilot", "season": 1, "number": 1, "airdate": "2013-06-24", "runtime": 60},
    {"id": 2, "name": "The Fire", "season": 1, "number": 2, "airdate": "2013-07-01", "runtime": 60},
    {"id": 3, "name": "Manhunt", "season": 2, "number": 1, "airdate": "2014-06-30", "runtime": 60},
]

EPISODES_SHOW_2 = [
    {"id": 101, "name": "Arrival", "season": 1, "number": 1, "airdate": "2015-01-01"},
    {"id": 102, "name": "Departure", "season": 1, "number": 2, "airdate": "2015-01-08"},
]


class FakeResponse:
    """The slice of niquests.Response the package uses."""

    def __init__(self, payload, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise niquests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return copy.deepcopy(self.payload)


class FakeSession:
    """
    Routes ``url → payload | FakeResponse | exception`` and records calls as
    ``(url, params, timeout)`` tuples.
    """

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[tuple] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def get(self, url, params=None, timeout=None):
        self.calls.append((url, dict(params or {}), timeout))
        result = self.routes[url]
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)


@pytest.fixture
def routes() -> dict:
    return {
        f"{BASE}/search/shows": SEARCH_PAYLOAD,
        f"{BASE}/shows/1/episodes": EPISODES_SHOW_1,
        f"{BASE}/shows/2/episodes": EPISODES_SHOW_2,
    }


@pytest.fixture
def session(routes) -> FakeSession:
    return FakeSession(routes)


@pytest.fixture
def search_payload() -> list:
    return copy.deepcopy(SEARCH_PAYLOAD)


@pytest.fixture
def episodes_payload() -> list:
    return copy.deepcopy(EPISODES_SHOW_1)
