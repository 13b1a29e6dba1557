"""Terminal decoration helpers for ltc command-line output."""

from .colors import (
    BLUE,
    BOLD,
    BRIGHT_RED,
    CYAN,
    DECORATION_ENABLED,
    DEFAULT,
    GRAY,
    GREEN,
    PURPLE,
    PURPLE_UNDERLINE,
    RED,
    YELLOW,
    bold,
    colorize,
    cyan,
    gray,
    green,
    no_color,
    purple_underline,
    red,
    supports_decoration,
    yellow,
)

__all__ = [
    "BLUE",
    "BOLD",
    "BRIGHT_RED",
    "CYAN",
    "DECORATION_ENABLED",
    "DEFAULT",
    "GRAY",
    "GREEN",
    "PURPLE",
    "PURPLE_UNDERLINE",
    "RED",
    "YELLOW",
    "bold",
    "colorize",
    "cyan",
    "gray",
    "green",
    "no_color",
    "purple_underline",
    "red",
    "supports_decoration",
    "yellow",
]
