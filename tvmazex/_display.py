"""
tvmazex._display
================
Coloured terminal output.

`print_shows(shows)`        — one card per show, summary reduced to text.
`print_episodes(episodes)`  — episodes grouped under season headers.

`TerminalShowsView` / `TerminalEpisodesView` wrap the same printers behind
the view interface the Presenter drives, for the interactive CLI.
"""

from __future__ import annotations

import sys
from itertools import groupby
from typing import Sequence, TextIO

from bs4 import BeautifulSoup

from .models import Show, Episode
from ._log import c, C, visible_len

W = 72


# ─── Helpers ──────────────────────────────────────────────────────────────────

def summary_text(markup: str) -> str:
    """Strip summary markup down to one line of plain text."""
    if not markup:
        return ""
    return " ".join(BeautifulSoup(markup, "html.parser").get_text(" ").split())


def _wrap(text: str, width: int = 64) -> list[str]:
    """Word-wrap *text* to lines of at most *width* chars."""
    if not text:
        return [""]
    words, lines, cur = text.split(), [], ""
    for w in words:
        if cur and len(cur) + 1 + len(w) > width:
            lines.append(cur)
            cur = w
        else:
            cur = (cur + " " + w).strip()
    if cur:
        lines.append(cur)
    return lines or [""]


def _rule(label: str, width: int = W) -> str:
    pad = width - 4 - visible_len(label)
    return c("  ┌", C.BCYAN) + label + c("─" * max(pad, 0) + "┐", C.BCYAN)


# ─── Public printers ──────────────────────────────────────────────────────────

def print_show(show: Show, out: TextIO | None = None, max_lines: int = 3) -> None:
    """Print a compact card for a single Show."""
    out = out or sys.stdout
    print(c("  │ ", C.BCYAN) + c(f"#{show.id:<7}", C.BYELLOW, C.BOLD) + " " + c(show.name, C.BWHITE, C.BOLD), file=out)

    lines = _wrap(summary_text(show.summary), width=W - 8)
    for i, line in enumerate(lines[:max_lines]):
        more = c(" …", C.DIM) if (i == max_lines - 1 and len(lines) > max_lines) else ""
        print(c("  │   ", C.BCYAN) + c(line, C.DIM) + more, file=out)

    print(c("  │   ", C.BCYAN) + c("▸ " + show.image, C.DIM), file=out)
    print(c("  │", C.BCYAN), file=out)


def print_shows(shows: Sequence[Show], out: TextIO | None = None) -> None:
    """Print every show under a results header."""
    out = out or sys.stdout
    print(file=out)
    print(_rule(c(" RESULTS ", C.BG_BLUE, C.BWHITE, C.BOLD) + c(f" {len(shows)} show(s) ", C.DIM)), file=out)
    if not shows:
        print(c("  │   ", C.BCYAN) + c("no matching shows", C.DIM), file=out)
    for show in shows:
        print_show(show, out)
    print(c("  └" + "─" * (W - 4) + "┘", C.BCYAN), file=out)


def print_episodes(episodes: Sequence[Episode], show_id: int | None = None, out: TextIO | None = None) -> None:
    """Print episodes grouped by season, in the order given."""
    out = out or sys.stdout
    title = f" EPISODES · show #{show_id} " if show_id is not None else " EPISODES "
    print(file=out)
    print(_rule(c(title, C.BG_BLUE, C.BWHITE, C.BOLD) + c(f" {len(episodes)} episode(s) ", C.DIM)), file=out)

    for season, eps in groupby(episodes, key=lambda e: e.season):
        print(c("  │ ", C.BCYAN) + c(f"Season {season}", C.BMAGENTA, C.BOLD), file=out)
        for ep in eps:
            print(c("  │   ", C.BCYAN) + c(f"{ep.code:<9}", C.BCYAN) + " " + ep.name, file=out)

    print(c("  └" + "─" * (W - 4) + "┘", C.BCYAN), file=out)


# ─── Presenter views ──────────────────────────────────────────────────────────

class TerminalShowsView:
    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out

    def render(self, shows: Sequence[Show]) -> None:
        print_shows(shows, self.out)


class TerminalEpisodesView:
    """A terminal cannot un-print, so hiding only resets the tracked show."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out
        self.show_id: int | None = None

    def render(self, show_id: int, episodes: Sequence[Episode]) -> None:
        self.show_id = show_id
        print_episodes(episodes, show_id, self.out)

    def hide(self) -> None:
        self.show_id = None
