"""
tvmazex._parse
==============
Shaping raw TVMaze JSON payloads into :mod:`tvmazex.models` records.

Two public entry points
-----------------------
parse_shows(payload, placeholder)   → list[Show]
parse_episodes(payload)             → list[Episode]

Both are all-or-nothing: a single malformed entry raises
UpstreamFormatFailure and no partial list is returned.
"""

from __future__ import annotations

from typing import Any

from .errors import UpstreamFormatFailure
from .models import Episode, Show


# ══════════════════════════════════════════════════════════════════════════════
#  Field helpers
# ══════════════════════════════════════════════════════════════════════════════

def _require_list(payload: Any, what: str) -> list:
    if not isinstance(payload, list):
        raise UpstreamFormatFailure(
            f"expected a JSON array of {what}, got {type(payload).__name__}"
        )
    return payload


def _require_dict(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise UpstreamFormatFailure(f"{what} is {type(value).__name__}, expected an object")
    return value


def _int_field(obj: dict, key: str, what: str) -> int:
    value = obj.get(key)
    # bool is an int subclass; upstream never sends one for an id
    if not isinstance(value, int) or isinstance(value, bool):
        raise UpstreamFormatFailure(f"{what}.{key} is {value!r}, expected an integer")
    return value


def _str_field(obj: dict, key: str, what: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise UpstreamFormatFailure(f"{what}.{key} is {value!r}, expected a string")
    return value


# ══════════════════════════════════════════════════════════════════════════════
#  Shows
# ══════════════════════════════════════════════════════════════════════════════

def pick_image(image: Any, placeholder: str) -> str:
    """
    Choose the display URL for a show's ``image`` field.

    null                      → placeholder
    {"medium": url, …}        → medium
    {"original": url} only    → original
    anything unusable         → placeholder
    """
    if image is None:
        return placeholder
    if not isinstance(image, dict):
        raise UpstreamFormatFailure(f"show.image is {type(image).__name__}, expected an object or null")
    for key in ("medium", "original"):
        url = image.get(key)
        if isinstance(url, str) and url:
            return url
    return placeholder


def normalize_show(entry: Any, placeholder: str) -> Show:
    """Turn one ``{"score": …, "show": {…}}`` search hit into a Show."""
    entry = _require_dict(entry, "search result")
    show  = _require_dict(entry.get("show"), "search result.show")

    summary = show.get("summary")
    if summary is None:
        summary = ""
    elif not isinstance(summary, str):
        raise UpstreamFormatFailure(f"show.summary is {summary!r}, expected a string or null")

    return Show(
        id      = _int_field(show, "id", "show"),
        name    = _str_field(show, "name", "show"),
        summary = summary,
        image   = pick_image(show.get("image"), placeholder),
    )


def parse_shows(payload: Any, placeholder: str) -> list[Show]:
    """Normalize a full ``/search/shows`` response, preserving order."""
    return [normalize_show(entry, placeholder) for entry in _require_list(payload, "search results")]


# ══════════════════════════════════════════════════════════════════════════════
#  Episodes
# ══════════════════════════════════════════════════════════════════════════════

def normalize_episode(entry: Any) -> Episode:
    """Passthrough extraction of ``{id, name, season, number}``."""
    entry = _require_dict(entry, "episode")

    number = entry.get("number")
    if number is not None:
        number = _int_field(entry, "number", "episode")

    return Episode(
        id     = _int_field(entry, "id", "episode"),
        name   = _str_field(entry, "name", "episode"),
        season = _int_field(entry, "season", "episode"),
        number = number,
    )


def parse_episodes(payload: Any) -> list[Episode]:
    """Normalize a full ``/shows/{id}/episodes`` response, preserving order."""
    return [normalize_episode(entry) for entry in _require_list(payload, "episodes")]
