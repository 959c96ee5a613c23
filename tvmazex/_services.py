"""
tvmazex._services
=================
The two query services: transport (_http) + shaping (_parse).

Each call issues exactly one request and returns a complete list, or raises.
End users normally go through :func:`tvmazex.search` and
:func:`tvmazex.episodes` instead.
"""

from __future__ import annotations

from niquests import AsyncSession

from . import _config
from ._http  import fetch_json
from ._log   import dbg, c, C
from ._parse import parse_shows, parse_episodes
from .models import Show, Episode


class _QueryService:
    """Session, endpoint root and timeout shared by both services."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session  = session
        self.base_url = _config.base_url(base_url)
        self.timeout  = _config.timeout(timeout)


class ShowsQueryService(_QueryService):
    """Free-text show search against ``/search/shows``."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        placeholder: str | None = None,
    ) -> None:
        super().__init__(session, base_url=base_url, timeout=timeout)
        self.placeholder = _config.placeholder_image(placeholder)

    async def search(self, term: str) -> list[Show]:
        """
        Search shows matching *term*.

        The term is sent verbatim as the ``q`` parameter (empty is allowed).
        Upstream order is kept; a null image becomes the placeholder URL.
        """
        payload = await fetch_json(
            f"{self.base_url}/search/shows",
            self.session,
            params={"q": term},
            timeout=self.timeout,
        )
        shows = parse_shows(payload, self.placeholder)
        dbg(f"     {c('✓', C.BGREEN)}  {c(len(shows), C.BWHITE, C.BOLD)} show(s) for {c(repr(term), C.BYELLOW)}")
        return shows


class EpisodesQueryService(_QueryService):
    """Per-show episode list from ``/shows/{id}/episodes``."""

    async def episodes(self, show_id: int) -> list[Episode]:
        """Return every episode of *show_id* in season-then-number order."""
        payload = await fetch_json(
            f"{self.base_url}/shows/{int(show_id)}/episodes",
            self.session,
            timeout=self.timeout,
        )
        eps = parse_episodes(payload)
        dbg(f"     {c('✓', C.BGREEN)}  {c(len(eps), C.BWHITE, C.BOLD)} episode(s) for show {c(show_id, C.BYELLOW)}")
        return eps
