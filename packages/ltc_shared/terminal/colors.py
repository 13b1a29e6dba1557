"""ANSI color decoration for terminal output.

Whether the terminal supports escape codes is decided once at import time;
the formatting functions never read the environment themselves.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

RED: Final = "\x1b[31m"
BRIGHT_RED: Final = "\x1b[91m"
CYAN: Final = "\x1b[36m"
GREEN: Final = "\x1b[32m"
YELLOW: Final = "\x1b[33m"
DEFAULT: Final = "\x1b[0m"
BOLD: Final = "\x1b[1m"
GRAY: Final = "\x1b[90m"
BLUE: Final = "\x1b[34m"
PURPLE: Final = "\x1b[35m"
PURPLE_UNDERLINE: Final = "\x1b[35;4m"


def supports_decoration(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when ``TERM`` is set to a non-empty value."""
    env = environ if environ is not None else os.environ
    return env.get("TERM", "") != ""


DECORATION_ENABLED: Final = supports_decoration()


def colorize(
    color: str,
    text: str,
    *args: object,
    enabled: bool = DECORATION_ENABLED,
) -> str:
    """Return ``text`` wrapped in ``color`` and a reset code when enabled.

    ``text`` is %-formatted with ``args`` only when args are given, so literal
    percent signs survive untouched otherwise.
    """
    out = text % args if args else text
    if not enabled:
        return out
    return f"{color}{out}{DEFAULT}"


def _decorate(color: str, text: str, enabled: bool) -> str:
    # Whitespace-only text is never wrapped.
    if text.strip() == "":
        return text
    return colorize(color, text, enabled=enabled)


def red(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in bright red."""
    return _decorate(BRIGHT_RED, text, enabled)


def green(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in green."""
    return _decorate(GREEN, text, enabled)


def cyan(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in cyan."""
    return _decorate(CYAN, text, enabled)


def yellow(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in yellow."""
    return _decorate(YELLOW, text, enabled)


def gray(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in gray."""
    return _decorate(GRAY, text, enabled)


def bold(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in bold."""
    return _decorate(BOLD, text, enabled)


def purple_underline(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` in underlined purple."""
    return _decorate(PURPLE_UNDERLINE, text, enabled)


def no_color(text: str, *, enabled: bool = DECORATION_ENABLED) -> str:
    """Return ``text`` wrapped in reset codes."""
    return _decorate(DEFAULT, text, enabled)
