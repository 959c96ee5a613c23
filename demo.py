"""
TVMazeX feature demo
────────────────────
Exercises every public API function against the live TVMaze API.

Usage:
    python demo.py                     # runs all demos ("bletchley")
    python demo.py girls               # use a different search term
    python demo.py bletchley --debug   # with verbose request output
"""

from __future__ import annotations

import argparse
import asyncio
import json
import tempfile
from pathlib import Path

import tvmazex
from tvmazex import (
    search,
    episodes,
    save_json,
    set_debug,
    make_session,
    Presenter,
    HtmlPage,
    ShowsQueryService,
    EpisodesQueryService,
    Show,
    Episode,
)


# ── helpers ───────────────────────────────────────────────────────────────────

def banner(text: str) -> None:
    print(f"\n{'─' * 60}")
    print(f"  {text}")
    print('─' * 60)

def ok(label: str, value=None) -> None:
    suffix = f"  →  {value}" if value is not None else ""
    print(f"  ✓  {label}{suffix}")

def check(condition: bool, label: str) -> None:
    icon = "✓" if condition else "✗"
    print(f"  {icon}  {label}")
    assert condition, f"FAILED: {label}"


# ── 1. search() ───────────────────────────────────────────────────────────────

def demo_search(term: str) -> list[Show]:
    banner(f"1 · search({term!r})")
    shows = search(term)
    check(isinstance(shows, list), f"returned {len(shows)} show(s)")
    check(len(shows) > 0, "at least one match")
    for s in shows[:5]:
        ok(str(s), s.image)
    check(all(s.image for s in shows), "every show has a non-empty image URL")
    check(all(set(s.to_dict()) == {"id", "name", "summary", "image"} for s in shows),
          "records carry exactly id, name, summary, image")
    return shows


# ── 2. episodes() ─────────────────────────────────────────────────────────────

def demo_episodes(show: Show) -> list[Episode]:
    banner(f"2 · episodes({show.id})  — {show.name}")
    eps = episodes(show.id)
    check(len(eps) > 0, f"returned {len(eps)} episode(s)")
    ok("first", eps[0])
    ok("last", eps[-1])
    check([e.season for e in eps] == sorted(e.season for e in eps), "ordered by season")
    check(episodes(show.id) == eps, "second call returns identical records")
    return eps


# ── 3. save_json() ────────────────────────────────────────────────────────────

def demo_save(shows: list[Show]) -> None:
    banner("3 · save_json()")
    with tempfile.NamedTemporaryFile(suffix=".json", delete=False) as f:
        path = Path(f.name)
    saved = save_json(shows, path)
    data  = json.loads(saved.read_text(encoding="utf-8"))
    check(len(data) == len(shows), f"{len(data)} record(s) written to {saved}")
    path.unlink()
    ok("temp file cleaned up")


# ── 4. Presenter + HtmlPage ───────────────────────────────────────────────────

async def _widget(term: str) -> HtmlPage:
    page = HtmlPage()
    async with make_session() as session:
        p = Presenter(
            page.shows_view,
            page.episodes_view,
            shows_service    = ShowsQueryService(session),
            episodes_service = EpisodesQueryService(session),
        )
        await p.search(term)
        check(not page.episodes_view.visible, "episodes area hidden after search")
        if p.shows:
            await p.expand(p.shows[0].id)
            check(page.episodes_view.visible, f"episodes area shown for #{p.expanded_show_id}")
    return page


def demo_widget(term: str) -> None:
    banner("4 · Presenter driving the HTML widget")
    page = asyncio.run(_widget(term))
    with tempfile.NamedTemporaryFile(suffix=".html", delete=False) as f:
        path = Path(f.name)
    page.save(path)
    check("data-show-id" in path.read_text(encoding="utf-8"), f"page written to {path}")
    path.unlink()


# ── main ──────────────────────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(description="TVMazeX feature demo")
    parser.add_argument("term", nargs="?", default="bletchley",
                        help="search term (default: bletchley)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable verbose request output")
    args = parser.parse_args()

    if args.debug:
        set_debug(True)

    print(f"\nTVMazeX v{tvmazex.__version__}  —  searching {args.term!r}\n")

    shows = demo_search(args.term)
    demo_episodes(shows[0])
    demo_save(shows)
    demo_widget(args.term)

    print(f"\n{'═' * 60}")
    print(f"  All demos passed  ✓")
    print(f"{'═' * 60}\n")


if __name__ == "__main__":
    main()
