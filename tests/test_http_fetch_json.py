"""
tests/test_http_fetch_json.py
=============================
Tests for the niquests transport layer.
HTTP calls go to an in-memory FakeSession — no real network requests.
"""

import asyncio

import niquests
import pytest

from conftest import FakeResponse, FakeSession
from tvmazex._http import make_session, fetch_json, HEADERS
from tvmazex.errors import NetworkFailure, UpstreamFormatFailure, TVMazeError

URL = "https://api.test/search/shows"


def run(coro):
    return asyncio.run(coro)


# ─── make_session ─────────────────────────────────────────────────────────────

class TestMakeSession:

    def test_returns_async_session_with_headers(self):
        async def go():
            async with make_session() as s:
                return s, dict(s.headers)

        session, headers = run(go())
        assert isinstance(session, niquests.AsyncSession)
        assert headers["Accept"] == "application/json"
        assert "tvmazex" in headers["User-Agent"]

    def test_headers_constant_asks_for_json(self):
        assert "json" in HEADERS["Accept"]


# ─── fetch_json ───────────────────────────────────────────────────────────────

class TestFetchJson:

    def test_returns_decoded_body(self):
        s = FakeSession({URL: [{"show": {"id": 1}}]})
        assert run(fetch_json(URL, s)) == [{"show": {"id": 1}}]

    def test_passes_params_and_timeout(self):
        s = FakeSession({URL: []})
        run(fetch_json(URL, s, params={"q": "the office"}, timeout=3.0))
        assert s.calls == [(URL, {"q": "the office"}, 3.0)]

    def test_exactly_one_request(self):
        s = FakeSession({URL: []})
        run(fetch_json(URL, s))
        assert len(s.calls) == 1

    def test_connection_error_is_network_failure(self):
        s = FakeSession({URL: niquests.exceptions.ConnectionError("refused")})
        with pytest.raises(NetworkFailure) as info:
            run(fetch_json(URL, s))
        assert info.value.url == URL
        assert info.value.status_code is None

    def test_timeout_is_network_failure(self):
        s = FakeSession({URL: niquests.exceptions.Timeout("slow")})
        with pytest.raises(NetworkFailure):
            run(fetch_json(URL, s))

    def test_http_error_status_is_network_failure(self):
        s = FakeSession({URL: FakeResponse({"message": "nope"}, status_code=503)})
        with pytest.raises(NetworkFailure) as info:
            run(fetch_json(URL, s))
        assert info.value.status_code == 503
        assert "503" in str(info.value)

    def test_no_retry_after_failure(self):
        s = FakeSession({URL: niquests.exceptions.ConnectionError("refused")})
        with pytest.raises(NetworkFailure):
            run(fetch_json(URL, s))
        assert len(s.calls) == 1

    def test_invalid_json_is_format_failure(self):
        s = FakeSession({URL: FakeResponse(ValueError("Expecting value"))})
        with pytest.raises(UpstreamFormatFailure) as info:
            run(fetch_json(URL, s))
        assert info.value.url == URL

    def test_both_failures_share_base_class(self):
        assert issubclass(NetworkFailure, TVMazeError)
        assert issubclass(UpstreamFormatFailure, TVMazeError)
