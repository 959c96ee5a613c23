"""
tvmazex._presenter
==================
Two-level disclosure: show list first, then the episodes of one show.

The Presenter owns no display state of its own beyond which show is expanded.
It is handed two view targets and two query services at construction time
and drives them:

    search(term)   → episodes view hidden, show list rebuilt
    expand(id)     → episodes view rebuilt for that one show

Overlapping calls are resolved with generation counters.  An action records
the counter when it starts and only touches the views if nothing newer has
started since; otherwise its result is dropped.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ._log import dbg, c, C
from ._services import ShowsQueryService, EpisodesQueryService
from .models import Show, Episode

RESULTS  = "results"
EPISODES = "episodes"


class ShowsView(Protocol):
    def render(self, shows: Sequence[Show]) -> None: ...


class EpisodesView(Protocol):
    def render(self, show_id: int, episodes: Sequence[Episode]) -> None: ...
    def hide(self) -> None: ...


class Presenter:
    """Coordinates the query services with a shows view and an episodes view."""

    def __init__(
        self,
        shows_view: ShowsView,
        episodes_view: EpisodesView,
        *,
        shows_service: ShowsQueryService,
        episodes_service: EpisodesQueryService,
    ) -> None:
        self.shows_view       = shows_view
        self.episodes_view    = episodes_view
        self.shows_service    = shows_service
        self.episodes_service = episodes_service

        self.shows: list[Show] = []
        self.expanded_show_id: int | None = None

        self._search_gen = 0
        self._expand_gen = 0

    @property
    def state(self) -> str:
        return RESULTS if self.expanded_show_id is None else EPISODES

    async def search(self, term: str) -> bool:
        """
        Run a search and show its results.

        Returns False when a newer search started while this one was in
        flight; its result is then discarded and the views are left alone.
        Service errors propagate and also leave the views alone.
        """
        self._search_gen += 1
        gen = self._search_gen

        shows = await self.shows_service.search(term)

        if gen != self._search_gen:
            dbg(c(f"  ↷  dropping stale search {term!r} (gen {gen} < {self._search_gen})", C.DIM))
            return False

        # an expand still in flight belongs to the list being replaced
        self._expand_gen += 1
        self.episodes_view.hide()
        self.expanded_show_id = None
        self.shows = list(shows)
        self.shows_view.render(self.shows)
        return True

    async def expand(self, show_id: int) -> bool:
        """
        Fetch and display the episodes of *show_id*, replacing any episode
        list already shown.  Returns False if the result went stale.
        """
        self._expand_gen += 1
        gen = self._expand_gen

        eps = await self.episodes_service.episodes(show_id)

        if gen != self._expand_gen:
            dbg(c(f"  ↷  dropping stale episodes for show {show_id} (gen {gen} < {self._expand_gen})", C.DIM))
            return False

        self.expanded_show_id = show_id
        self.episodes_view.render(show_id, eps)
        return True
