"""
tvmazex.models
==============
The two normalized records this package returns.

    from tvmazex import search, episodes
    shows = search("bletchley")     → list[Show]
    eps   = episodes(shows[0].id)   → list[Episode]

Records are rebuilt from scratch on every query; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterable, Optional, Union
import json


# ─── Show ─────────────────────────────────────────────────────────────────────

@dataclass
class Show:
    """A TV show as returned by the search endpoint."""

    id:      int        # 1767
    name:    str        # "The Bletchley Circle"
    summary: str        # "<p><b>The Bletchley Circle</b> follows …</p>"  ("" if none)
    image:   str        # medium poster URL, or the placeholder URL

    def __str__(self) -> str:
        return f"{self.name}  [#{self.id}]"

    def to_dict(self) -> dict:
        return asdict(self)


# ─── Episode ──────────────────────────────────────────────────────────────────

@dataclass
class Episode:
    """A single episode of a show, in upstream (season, number) order."""

    id:     int
    name:   str
    season: int
    number: Optional[int]   # None for specials

    @property
    def code(self) -> str:
        """``S1.E3`` style label; specials render as ``S1.SP``."""
        ep = f"E{self.number}" if self.number is not None else "SP"
        return f"S{self.season}.{ep}"

    def __str__(self) -> str:
        return f"{self.code} · {self.name}"

    def to_dict(self) -> dict:
        return asdict(self)


Record = Union[Show, Episode]


def save_json(records: Iterable[Record], path: str | Path) -> Path:
    """Write *records* as a JSON array to *path*. Returns the Path written."""
    p = Path(path)
    payload = [r.to_dict() for r in records]
    p.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return p
