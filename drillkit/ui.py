"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os
import sys

_RED = "31"
_GREEN = "32"


def no_emoji() -> bool:
    """Return True when the ``NO_EMOJI`` environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, code: str) -> str:
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def warn(message: str) -> str:
    """Print ``message`` as a red warning line and return the printed line."""
    mark = "!" if no_emoji() else "⚠️ "
    line = f"{_paint(mark, _RED)} {_paint(message, _RED)}"
    print(line)
    return line


def success(message: str) -> str:
    """Print ``message`` as a green success line and return the printed line."""
    mark = "✓" if no_emoji() else "✅"
    line = f"{_paint(mark, _GREEN)} {_paint(message, _GREEN)}"
    print(line)
    return line