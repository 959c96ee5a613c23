"""
tvmazex.cli
===========
Command-line interface for TVMazeX.  Installed as the ``tvmazex`` command.

Usage
-----
    tvmazex bletchley                     # search and print show cards
    tvmazex --episodes 1767               # episodes of one show
    tvmazex bletchley -o shows.json       # save normalized results
    tvmazex bletchley --html shows.html   # render the search widget page
    tvmazex bletchley --episodes 1767 --html page.html
    tvmazex -i                            # interactive search / expand loop
    tvmazex --test                        # run the unit-test suite
    tvmazex --test bletchley              # live smoke test
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from . import search, episodes, set_debug
from ._display import print_shows, print_episodes, TerminalShowsView, TerminalEpisodesView
from ._html import HtmlPage
from ._http import make_session
from ._log import c, C
from ._presenter import Presenter
from ._services import ShowsQueryService, EpisodesQueryService
from .errors import TVMazeError
from .models import save_json


# ─────────────────────────────────────────────────────────────────────────────
#  Internal helpers
# ─────────────────────────────────────────────────────────────────────────────

def _run_tests() -> None:
    """Run the pytest suite and exit with pytest's return code."""
    try:
        import pytest
    except ImportError:
        print(
            f"{c('✗  pytest not found.', C.BRED, C.BOLD)}  "
            "Install dev extras:  " + c('pip install "TVMazeX[dev]"', C.BCYAN),
            file=sys.stderr,
        )
        sys.exit(1)

    from pathlib import Path

    tests_dir = Path(__file__).parent.parent / "tests"
    if not (tests_dir / "test_parse_shows.py").exists():
        print(
            f"{c('✗  TVMazeX tests not found.', C.BRED, C.BOLD)}  "
            "Run from a source checkout with  " + c('pip install -e ".[dev]"', C.BCYAN),
            file=sys.stderr,
        )
        sys.exit(1)

    print(f"\n{c('▸  Running test suite', C.BWHITE, C.BOLD)} → {c(str(tests_dir), C.BCYAN)}\n")
    sys.exit(pytest.main([str(tests_dir), "-v", "--tb=short"]))


def _run_smoke_test(term: str, base_url: str | None, timeout: float | None) -> None:
    """Search *term* live, then fetch the episodes of the first hit."""
    import traceback

    print(f"\n{c('▸  Smoke test', C.BWHITE, C.BOLD)}: {c(term, C.BCYAN)}\n")
    steps: list[tuple[str, bool, str]] = []

    def check(label: str, fn):
        try:
            result = fn()
            steps.append((label, True, repr(result)[:120]))
            return result
        except Exception:
            steps.append((label, False, traceback.format_exc(limit=3)))
            return None

    def expect(cond: bool, msg: str):
        if not cond:
            raise AssertionError(msg)
        return True

    shows = check(f"search({term!r})", lambda: search(term, base_url=base_url, timeout=timeout))
    if shows is not None:
        check("at least 1 show returned", lambda: expect(bool(shows), "no shows"))
        check("every show has an image URL", lambda: expect(all(s.image for s in shows), "empty image"))
        if shows:
            first = shows[0]
            eps = check(
                f"episodes({first.id})",
                lambda: episodes(first.id, base_url=base_url, timeout=timeout),
            )
            if eps:
                check(
                    "episodes ordered by season",
                    lambda: expect([e.season for e in eps] == sorted(e.season for e in eps), "unordered"),
                )

    passed = sum(1 for _, ok, _ in steps if ok)
    failed = len(steps) - passed

    for label, ok, detail in steps:
        icon   = c("✓", C.BGREEN, C.BOLD) if ok else c("✗", C.BRED, C.BOLD)
        colour = C.GREEN if ok else C.RED
        print(f"  {icon}  {c(label, colour)}")
        if not ok:
            for line in detail.splitlines():
                print(f"       {c(line, C.DIM)}")

    print()
    print(c(f"  {passed} passed, {failed} failed", C.BGREEN if failed == 0 else C.BRED, C.BOLD))
    print()
    sys.exit(0 if failed == 0 else 1)


_EXPAND_WORDS = {"e", "ep", "episodes"}


def parse_command(line: str) -> tuple[str, str | int | None]:
    """
    Classify one interactive input line.

    ``q`` / ``quit`` / ``exit``   → ("quit", None)
    ``e 1767`` / ``episodes 1767`` → ("expand", 1767)
    anything else                 → ("search", line), digits included
    """
    line = line.strip()
    if line.lower() in {"q", "quit", "exit"}:
        return "quit", None
    head, _, rest = line.partition(" ")
    rest = rest.strip()
    if head.lower() in _EXPAND_WORDS and rest.isdigit():
        return "expand", int(rest)
    return "search", line


async def _interactive(base_url: str | None, timeout: float | None) -> None:
    """
    Prompt loop over a Presenter with terminal views.

    ``e ID`` expands a listed show, ``q`` quits, anything else is a new
    search, so a title like "24" is searched rather than expanded.
    """
    async with make_session() as session:
        presenter = Presenter(
            TerminalShowsView(),
            TerminalEpisodesView(),
            shows_service    = ShowsQueryService(session, base_url=base_url, timeout=timeout),
            episodes_service = EpisodesQueryService(session, base_url=base_url, timeout=timeout),
        )
        print(c("Type a title to search, 'e ID' to list a show's episodes, q to quit.", C.DIM))
        while True:
            try:
                line = (await asyncio.to_thread(input, c("tvmaze› ", C.BCYAN, C.BOLD))).strip()
            except EOFError:
                break
            if not line:
                continue
            action, arg = parse_command(line)
            if action == "quit":
                break
            try:
                if action == "expand":
                    if not any(s.id == arg for s in presenter.shows):
                        print(c(f"  ✗  show #{arg} is not in the current results", C.BYELLOW))
                        continue
                    await presenter.expand(arg)
                else:
                    await presenter.search(arg)
            except TVMazeError as exc:
                print(c(f"  ✗  {exc}", C.BRED), file=sys.stderr)


async def _render_page(term: str | None, show_id: int | None, base_url, timeout) -> HtmlPage:
    page = HtmlPage()
    async with make_session() as session:
        presenter = Presenter(
            page.shows_view,
            page.episodes_view,
            shows_service    = ShowsQueryService(session, base_url=base_url, timeout=timeout),
            episodes_service = EpisodesQueryService(session, base_url=base_url, timeout=timeout),
        )
        if term is not None:
            await presenter.search(term)
        if show_id is not None:
            await presenter.expand(show_id)
    return page


# ─────────────────────────────────────────────────────────────────────────────
#  main()
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tvmazex",
        description=(
            f"{c('TVMazeX', C.BWHITE, C.BOLD)}\n"
            f"{c('Search TV shows on TVMaze and list their episodes.', C.DIM)}\n\n"
            f"{c('Examples:', C.BYELLOW)}\n"
            f"  tvmazex bletchley                    {c('# search shows', C.DIM)}\n"
            f"  tvmazex --episodes 1767              {c('# episodes of one show', C.DIM)}\n"
            f"  tvmazex bletchley -o out.json        {c('# save results as JSON', C.DIM)}\n"
            f"  tvmazex bletchley --html out.html    {c('# render the widget page', C.DIM)}\n"
            f"  tvmazex -i                           {c('# interactive mode', C.DIM)}\n"
            f"  tvmazex --test                       {c('# run the unit-test suite', C.DIM)}\n"
            f"  tvmazex --test bletchley             {c('# live smoke-test', C.DIM)}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "term",
        nargs="*",
        metavar="TERM",
        help="Search words, joined with spaces and sent as the q parameter.",
    )
    parser.add_argument(
        "-e", "--episodes",
        type=int,
        default=None,
        dest="show_id",
        metavar="ID",
        help="List the episodes of the show with this TVMaze id.",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help=(
            "Write the normalized records to this JSON file.  With --episodes "
            "the episodes are written, otherwise the shows."
        ),
    )
    parser.add_argument(
        "--html",
        default=None,
        metavar="FILE",
        help=(
            "Write the search widget as an HTML page: the show cards for TERM, "
            "and the episodes area filled in when --episodes is also given."
        ),
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Prompt for searches; 'e ID' lists the episodes of a listed show, 'q' quits.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        dest="base_url",
        metavar="URL",
        help="API root.  Default: $TVMAZEX_BASE_URL or https://api.tvmaze.com.",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Per-request timeout; 0 waits forever.  Default: $TVMAZEX_TIMEOUT or 15.",
    )
    parser.add_argument(
        "--test",
        nargs="?",
        const="",
        default=None,
        metavar="TERM",
        help=(
            "--test runs the offline pytest suite.  "
            "--test TERM runs a live smoke test against the real API."
        ),
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=False,
        help="Print every request and result count to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_debug(True)

    if args.test is not None:
        if args.test == "":
            _run_tests()
        else:
            _run_smoke_test(args.test, args.base_url, args.timeout)
        return

    term = " ".join(args.term) if args.term else None

    try:
        if args.interactive:
            asyncio.run(_interactive(args.base_url, args.timeout))
            return

        if term is None and args.show_id is None:
            parser.print_help()
            sys.exit(1)

        if args.html:
            page  = asyncio.run(_render_page(term, args.show_id, args.base_url, args.timeout))
            saved = page.save(args.html)
            print(f"{c('▸  Saved', C.BGREEN, C.BOLD)} → {c(str(saved), C.BCYAN)}")
            return

        if args.show_id is not None:
            records = episodes(args.show_id, base_url=args.base_url, timeout=args.timeout)
            print_episodes(records, args.show_id)
        else:
            records = search(term, base_url=args.base_url, timeout=args.timeout)
            print_shows(records)

        if args.output:
            saved = save_json(records, args.output)
            print(f"\n{c('▸  Saved', C.BGREEN, C.BOLD)} → {c(str(saved), C.BCYAN)}")

    except TVMazeError as exc:
        print(f"{c('✗', C.BRED, C.BOLD)}  {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
