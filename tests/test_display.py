"""
tests/test_display.py
=====================
Terminal printers and terminal views.  Output captured with capsys.
"""

import re

from tvmazex._display import (
    summary_text, print_shows, print_episodes,
    TerminalShowsView, TerminalEpisodesView,
)
from tvmazex.models import Show, Episode

ANSI = re.compile(r"\033\[[^m]*m")


def plain(text: str) -> str:
    return ANSI.sub("", text)


class TestSummaryText:

    def test_markup_stripped(self):
        assert summary_text("<p><b>The Bletchley Circle</b> follows four women.</p>") == \
            "The Bletchley Circle follows four women."

    def test_entities_decoded(self):
        assert summary_text("<p>Sword &amp; Sorcery</p>") == "Sword & Sorcery"

    def test_empty(self):
        assert summary_text("") == ""


class TestPrinters:

    def test_print_shows_lists_each_show(self, capsys):
        print_shows([
            Show(1767, "The Bletchley Circle", "<p>Four women.</p>", "https://i/1.jpg"),
            Show(2, "Other", "", "https://tinyurl.com/tv-missing"),
        ])
        out = plain(capsys.readouterr().out)
        assert "The Bletchley Circle" in out
        assert "#1767" in out
        assert "Four women." in out
        assert "<p>" not in out
        assert "https://tinyurl.com/tv-missing" in out
        assert "2 show(s)" in out

    def test_print_shows_empty(self, capsys):
        print_shows([])
        assert "no matching shows" in plain(capsys.readouterr().out)

    def test_print_episodes_grouped_by_season(self, capsys):
        print_episodes([
            Episode(1, "Pilot", 1, 1),
            Episode(2, "Two", 1, 2),
            Episode(3, "Return", 2, 1),
        ], show_id=1)
        out = plain(capsys.readouterr().out)
        assert out.count("Season 1") == 1
        assert out.count("Season 2") == 1
        assert out.index("Pilot") < out.index("Two") < out.index("Return")
        assert "S2.E1" in out
        assert "show #1" in out


class TestTerminalViews:

    def test_shows_view_prints(self, capsys):
        TerminalShowsView().render([Show(5, "Five", "", "https://i/5.jpg")])
        assert "Five" in plain(capsys.readouterr().out)

    def test_episodes_view_tracks_show_and_hides(self, capsys):
        view = TerminalEpisodesView()
        view.render(9, [Episode(1, "Pilot", 1, 1)])
        assert view.show_id == 9
        assert "Pilot" in plain(capsys.readouterr().out)
        view.hide()
        assert view.show_id is None
