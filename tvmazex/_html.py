"""
tvmazex._html
=============
HTML rendering of the search widget with BeautifulSoup.

Every element is built with ``new_tag`` and text is assigned as strings, so
show names, ids and URLs are escaped by the serializer.  Show summaries are
the one place upstream markup is kept, and they go through
:func:`sanitize_summary` first.

Page layout
-----------
    form#searchForm        input#searchForm-term + submit button
    div#showsList          one div.Show card per show (data-show-id="…")
    section#episodesArea   hidden until a show is expanded
      ul#episodesList      one <li> per episode
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

from .models import Show, Episode

# Inline formatting TVMaze uses in summaries; everything else is unwrapped.
SUMMARY_TAGS = frozenset({"p", "b", "strong", "i", "em", "u", "br"})
# Removed together with their contents.
DROPPED_TAGS = frozenset({"script", "style", "iframe", "object", "embed", "template"})

HIDDEN = "display: none"

_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>TV Show Search</title>
  <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css">
</head>
<body class="bg-dark text-light">
<main class="container">
  <h1>TV Show Search</h1>
  <form id="searchForm" class="form-inline">
    <input id="searchForm-term" name="term" class="form-control" placeholder="Show title">
    <button class="btn btn-primary">Go!</button>
  </form>
  <div id="showsList" class="row mt-3"></div>
  <section id="episodesArea" style="display: none">
    <h2>Episodes</h2>
    <ul id="episodesList"></ul>
  </section>
</main>
</body>
</html>
"""


_FACTORY = BeautifulSoup("", "html.parser")


def _tag(name: str, string: str | None = None, **attrs) -> Tag:
    # class_ / data_* keyword spelling → real attribute names
    fixed = {k.rstrip("_").replace("_", "-"): str(v) for k, v in attrs.items()}
    tag = _FACTORY.new_tag(name, attrs=fixed)
    if string is not None:
        tag.string = string
    return tag


# ─── Summary sanitising ───────────────────────────────────────────────────────

def sanitize_summary(markup: str | None) -> list:
    """
    Parse a show summary and return its top-level nodes, cleaned.

    Allowed formatting tags survive with their attributes stripped; script-like
    tags are dropped with their content; any other tag is replaced by its
    children; comments, doctypes and CDATA are removed.
    """
    frag = BeautifulSoup(markup or "", "html.parser")

    for node in frag.find_all(string=lambda s: isinstance(s, PreformattedString)):
        node.extract()

    for tag in frag.find_all(True):
        if tag.decomposed:
            continue
        if tag.name in DROPPED_TAGS:
            tag.decompose()
        elif tag.name in SUMMARY_TAGS:
            tag.attrs = {}
        else:
            tag.unwrap()

    return list(frag.contents)


# ─── Views ────────────────────────────────────────────────────────────────────

class HtmlShowsView:
    """Renders show cards into an injected region element."""

    def __init__(self, region: Tag) -> None:
        self.region = region

    def card(self, show: Show) -> Tag:
        card  = _tag("div", data_show_id=show.id, class_="Show col-md-12 col-lg-6 mb-4")
        media = _tag("div", class_="media")
        media.append(_tag("img", src=show.image, alt=show.name, class_="w-25 me-3"))

        body = _tag("div", class_="media-body")
        body.append(_tag("h5", show.name, class_="text-primary"))
        small = _tag("small")
        for node in sanitize_summary(show.summary):
            small.append(node)
        wrapper = _tag("div")
        wrapper.append(small)
        body.append(wrapper)
        body.append(_tag("button", "Episodes", class_="btn btn-outline-light btn-sm Show-getEpisodes"))

        media.append(body)
        card.append(media)
        return card

    def render(self, shows: Sequence[Show]) -> None:
        self.region.clear()
        for show in shows:
            self.region.append(self.card(show))


class HtmlEpisodesView:
    """Episode list inside a hideable area, both injected."""

    def __init__(self, area: Tag, list_region: Tag) -> None:
        self.area        = area
        self.list_region = list_region

    @property
    def visible(self) -> bool:
        return self.area.get("style") != HIDDEN

    @staticmethod
    def label(ep: Episode) -> str:
        number = ep.number if ep.number is not None else "special"
        return f"{ep.name} (season {ep.season}, number {number})"

    def render(self, show_id: int, episodes: Sequence[Episode]) -> None:
        self.list_region.clear()
        self.list_region["data-show-id"] = str(show_id)
        for ep in episodes:
            self.list_region.append(_tag("li", self.label(ep), data_episode_id=ep.id))
        if "style" in self.area.attrs:
            del self.area["style"]

    def hide(self) -> None:
        self.area["style"] = HIDDEN


class HtmlPage:
    """
    The whole widget document, with both views bound to its regions.

        page = HtmlPage()
        presenter = Presenter(page.shows_view, page.episodes_view, …)
        …
        page.save("shows.html")
    """

    def __init__(self) -> None:
        self.soup = BeautifulSoup(_PAGE, "html.parser")
        self.shows_view = HtmlShowsView(self.soup.find(id="showsList"))
        self.episodes_view = HtmlEpisodesView(
            self.soup.find(id="episodesArea"),
            self.soup.find(id="episodesList"),
        )

    def render(self) -> str:
        return str(self.soup)

    def save(self, path: str | Path) -> Path:
        p = Path(path)
        p.write_text(self.render(), encoding="utf-8")
        return p
