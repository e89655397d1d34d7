"""Terminal emphasis for section labels."""

from __future__ import annotations

from typing import TextIO

_BOLD = "\033[1m"
_RESET = "\033[0m"


def use_color(stream: TextIO, mode: str = "auto") -> bool:
    """Decide whether *stream* should get ANSI styling for color *mode*."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def bold(text: str, enabled: bool = True) -> str:
    return f"{_BOLD}{text}{_RESET}" if enabled else text
