"""
tvmazex._http
=============
niquests transport for the TVMaze JSON API.

Responsibilities
----------------
• Build one niquests.AsyncSession per caller, with shared headers
• Issue a single GET per query (no retry, no cache)
• Translate transport errors into NetworkFailure and bad bodies into
  UpstreamFormatFailure
"""

from __future__ import annotations

from typing import Any, Mapping

import niquests
from niquests import AsyncSession

from ._log import dbg, c, C
from .errors import NetworkFailure, UpstreamFormatFailure


# ─── Shared headers ───────────────────────────────────────────────────────────

HEADERS = {
    "User-Agent": "tvmazex (+https://www.tvmaze.com/api)",
    "Accept": "application/json",
    "Accept-Encoding": "gzip, deflate, br",
}


# ─── Session factory ──────────────────────────────────────────────────────────

def make_session() -> AsyncSession:
    """
    Return an AsyncSession carrying the package headers.

    The caller owns it: use ``async with make_session() as s:`` or close it.
    """
    session = AsyncSession()
    session.headers.update(HEADERS)
    return session


# ─── Fetch helper ─────────────────────────────────────────────────────────────

async def fetch_json(
    url: str,
    session: AsyncSession,
    params: Mapping[str, Any] | None = None,
    timeout: float | None = None,
) -> Any:
    """
    GET *url* once and return the decoded JSON body.

    Raises NetworkFailure when the request fails or the status is not 2xx,
    and UpstreamFormatFailure when the body is not JSON.
    """
    dbg(c(f"  → GET {url}", C.DIM), c(dict(params) if params else "", C.DIM))
    try:
        resp = await session.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
    except niquests.exceptions.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        dbg(c(f"  ✗  HTTP {status} {url}", C.RED))
        raise NetworkFailure(f"upstream answered HTTP {status}", url=url, status_code=status) from exc
    except niquests.exceptions.RequestException as exc:
        dbg(c(f"  ✗  {url} — {exc}", C.RED))
        raise NetworkFailure(f"request failed: {exc}", url=url) from exc

    try:
        body = resp.json()
    except ValueError as exc:
        raise UpstreamFormatFailure("response body is not valid JSON", url=url) from exc

    dbg(c(f"  ✓  {resp.status_code} {url}", C.BGREEN))
    return body
