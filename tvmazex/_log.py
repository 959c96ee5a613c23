"""
tvmazex._log
============
Debug output and terminal colouring shared by every layer.

One module-level flag, `_DEBUG`, gates `dbg()`.  Flip it with
`set_debug(True)` from the CLI (`--debug`) or from Python code.
Debug lines go to stderr so they never mix with JSON written to stdout.
"""

from __future__ import annotations

import re
import sys

_DEBUG: bool = False

_ANSI = re.compile(r"\033\[[^m]*m")


def set_debug(enabled: bool) -> None:
    """Enable or disable verbose debug output package-wide."""
    global _DEBUG
    _DEBUG = bool(enabled)


def is_debug() -> bool:
    return _DEBUG


def dbg(*args, **kwargs) -> None:
    """Print to stderr only when debug mode is active."""
    if _DEBUG:
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)


# ─── ANSI colour helpers ──────────────────────────────────────────────────────

class C:
    """ANSI escape code constants."""
    RESET    = "\033[0m"
    BOLD     = "\033[1m"
    DIM      = "\033[2m"
    RED      = "\033[31m"
    GREEN    = "\033[32m"
    YELLOW   = "\033[33m"
    CYAN     = "\033[36m"
    BRED     = "\033[91m"
    BGREEN   = "\033[92m"
    BYELLOW  = "\033[93m"
    BMAGENTA = "\033[95m"
    BCYAN    = "\033[96m"
    BWHITE   = "\033[97m"
    BG_BLUE  = "\033[44m"


def c(text, *codes: str) -> str:
    """Wrap *text* in ANSI colour codes."""
    return "".join(codes) + str(text) + C.RESET


def visible_len(text: str) -> int:
    """Length of *text* once ANSI escapes are stripped."""
    return len(_ANSI.sub("", text))
