"""Terminal color helpers for formatter diagnostics.

ANSI codes are applied only when stdout is a TTY, unless overridden by the
NO_COLOR / FORCE_COLOR environment variables.
"""

from __future__ import annotations

import os
import sys
from typing import Literal

_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_blue": "\033[94m",
}

ColorName = Literal[
    "reset", "bold", "dim", "red", "green", "yellow", "cyan", "bright_red", "bright_blue"
]


def _should_use_colors() -> bool:
    """Decide once whether diagnostics are colored.

    Respects:
        - FORCE_COLOR (wins over everything)
        - NO_COLOR (https://no-color.org/)
        - sys.stdout.isatty()
    """
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap text in ANSI codes, or return it unchanged when colors are off.

    Example:
        >>> colorize("H-TOK-001", "bright_red", "bold")
        '\033[91m\033[1mH-TOK-001\033[0m'  # if colors supported
    """
    if not _USE_COLORS or not colors:
        return text

    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_COLORS['reset']}"


def error_code(text: str) -> str:
    """Error code (bright red + bold)."""
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    """Token location such as ``12:4`` (cyan)."""
    return colorize(text, "cyan")


def hint(text: str) -> str:
    """Suggestion text (green)."""
    return colorize(text, "green")


def docs_url(text: str) -> str:
    return colorize(text, "bright_blue")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix a message with its colored error code, when there is one.

    Example:
        >>> format_error_header("H-CFG-001", "line_length must be positive")
        '\033[91m\033[1mH-CFG-001:\033[0m line_length must be positive'
    """
    if code:
        return f"{error_code(code + ':')} {message}"
    return message
