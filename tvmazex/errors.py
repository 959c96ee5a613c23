"""
tvmazex.errors
==============
Exceptions raised by the query services.

Both failures propagate out of the awaited call; nothing inside the package
catches or retries them.

    TVMazeError
    ├── NetworkFailure          request could not complete (or non-2xx)
    └── UpstreamFormatFailure   body was not JSON of the expected shape
"""

from __future__ import annotations


class TVMazeError(Exception):
    """Base class for every error raised by tvmazex."""

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        return f"{self.message} [{self.url}]" if self.url else self.message


class NetworkFailure(TVMazeError):
    """The request failed before a usable response arrived."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class UpstreamFormatFailure(TVMazeError):
    """The response did not parse as the expected JSON shape."""
