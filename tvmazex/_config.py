"""
tvmazex._config
===============
Defaults for the upstream endpoint, the placeholder image and the request
timeout.  Each one can be overridden from the environment; explicit
function arguments and CLI flags win over both.

    TVMAZEX_BASE_URL            https://api.tvmaze.com
    TVMAZEX_PLACEHOLDER_IMAGE   https://tinyurl.com/tv-missing
    TVMAZEX_TIMEOUT             15   (seconds, 0 disables)
"""

from __future__ import annotations

import os

DEFAULT_BASE_URL          = "https://api.tvmaze.com"
DEFAULT_PLACEHOLDER_IMAGE = "https://tinyurl.com/tv-missing"
DEFAULT_TIMEOUT           = 15.0


def base_url(override: str | None = None) -> str:
    """Resolve the API root, without a trailing slash."""
    url = override or os.getenv("TVMAZEX_BASE_URL") or DEFAULT_BASE_URL
    return url.rstrip("/")


def placeholder_image(override: str | None = None) -> str:
    return override or os.getenv("TVMAZEX_PLACEHOLDER_IMAGE") or DEFAULT_PLACEHOLDER_IMAGE


def timeout(override: float | None = None) -> float | None:
    """
    Resolve the per-request timeout in seconds.

    ``0`` (from either source) means "wait forever" and is returned as None.
    A malformed environment value raises ValueError rather than being ignored.
    """
    if override is not None:
        value = float(override)
    else:
        raw = os.getenv("TVMAZEX_TIMEOUT", "").strip()
        value = float(raw) if raw else DEFAULT_TIMEOUT
    return value if value > 0 else None
