"""
tvmazex
=======
Public API for the TVMazeX show search client.

Quick start
-----------
    from tvmazex import search, episodes

    # ── Search ────────────────────────────────────────────────────────────────
    shows = search("bletchley")          # list[Show], upstream order
    s = shows[0]
    s.id, s.name                         # 1767, "The Bletchley Circle"
    s.image                              # medium poster URL (never empty)
    s.summary                            # "<p><b>The Bletchley Circle</b> …"

    # ── Episodes of one show ──────────────────────────────────────────────────
    for ep in episodes(s.id):
        print(ep)                        # S1.E1 · Cracking Murder: Part 1

    # ── Async ─────────────────────────────────────────────────────────────────
    shows = await search_async("bletchley")
    eps   = await episodes_async(1767)

    # ── Widget: show list → episodes of one show ──────────────────────────────
    async with make_session() as session:
        page = HtmlPage()
        p = Presenter(
            page.shows_view, page.episodes_view,
            shows_service    = ShowsQueryService(session),
            episodes_service = EpisodesQueryService(session),
        )
        await p.search("bletchley")
        await p.expand(p.shows[0].id)
    page.save("bletchley.html")

Available symbols
-----------------
Functions
    search(term, ...)          → list[Show]
    episodes(show_id, ...)     → list[Episode]
    search_async / episodes_async
    save_json(records, path)   → Path
    make_session()             → niquests.AsyncSession

Services / presentation
    ShowsQueryService, EpisodesQueryService, Presenter
    HtmlPage, TerminalShowsView, TerminalEpisodesView

Dataclasses
    Show
    Episode

Errors
    TVMazeError, NetworkFailure, UpstreamFormatFailure

Debug
    set_debug(True)            enable verbose request output
"""

from __future__ import annotations

import asyncio
from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PNF

try:
    __version__ = _pkg_version("TVMazeX")
except _PNF:
    __version__ = "0.0.0.dev"

# ── Re-export public dataclasses and errors ───────────────────────────────────
from .models import Show, Episode, save_json
from .errors import TVMazeError, NetworkFailure, UpstreamFormatFailure

# ── Internal engine ───────────────────────────────────────────────────────────
from ._http import make_session
from ._services import ShowsQueryService, EpisodesQueryService
from ._presenter import Presenter
from ._html import HtmlPage
from ._display import TerminalShowsView, TerminalEpisodesView, print_shows, print_episodes
from ._log import set_debug

__all__ = [
    # Public functions
    "search",
    "episodes",
    "search_async",
    "episodes_async",
    "save_json",
    "make_session",
    "set_debug",
    "print_shows",
    "print_episodes",
    # Services / presentation
    "ShowsQueryService",
    "EpisodesQueryService",
    "Presenter",
    "HtmlPage",
    "TerminalShowsView",
    "TerminalEpisodesView",
    # Dataclasses
    "Show",
    "Episode",
    # Errors
    "TVMazeError",
    "NetworkFailure",
    "UpstreamFormatFailure",
]


# ─────────────────────────────────────────────────────────────────────────────
#  search()
# ─────────────────────────────────────────────────────────────────────────────

async def search_async(
    term: str,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
) -> list[Show]:
    """Awaitable form of :func:`search`. Opens and closes its own session."""
    async with make_session() as session:
        service = ShowsQueryService(session, base_url=base_url, timeout=timeout)
        return await service.search(term)


def search(
    term: str,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
) -> list[Show]:
    """
    Search TVMaze for shows matching *term*.

    Parameters
    ----------
    term:
        Free text, sent as the ``q`` query parameter.  May be empty.
    base_url:
        API root.  Defaults to ``$TVMAZEX_BASE_URL`` or
        ``https://api.tvmaze.com``.
    timeout:
        Seconds before the request is abandoned; ``0`` waits forever.
        Defaults to ``$TVMAZEX_TIMEOUT`` or 15.

    Returns
    -------
    list[Show]
        In upstream order.  Shows without artwork carry the placeholder URL.

    Raises
    ------
    NetworkFailure, UpstreamFormatFailure
        Nothing partial is ever returned.

    Examples
    --------
        shows = search("bletchley")
        shows = search("office", base_url="http://localhost:8080")
    """
    return asyncio.run(search_async(term, base_url=base_url, timeout=timeout))


# ─────────────────────────────────────────────────────────────────────────────
#  episodes()
# ─────────────────────────────────────────────────────────────────────────────

async def episodes_async(
    show_id: int,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
) -> list[Episode]:
    """Awaitable form of :func:`episodes`."""
    async with make_session() as session:
        service = EpisodesQueryService(session, base_url=base_url, timeout=timeout)
        return await service.episodes(show_id)


def episodes(
    show_id: int,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
) -> list[Episode]:
    """
    Fetch every episode of one show, ordered by season then number.

    Each Episode carries exactly ``id``, ``name``, ``season`` and ``number``
    (``None`` for specials).

    Examples
    --------
        for ep in episodes(1767):
            print(ep.code, ep.name)
    """
    return asyncio.run(episodes_async(show_id, base_url=base_url, timeout=timeout))
