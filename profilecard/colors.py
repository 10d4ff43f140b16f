"""ANSI styling helpers used for the card and CLI messages."""

from __future__ import annotations

import os
from typing import TextIO


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"
    RED = "\033[31m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GREY = "\033[90m"
    BRIGHT_GREEN = "\033[92m"


def hex_color(value: str) -> str:
    """Return the 24-bit foreground escape code for a ``#RRGGBB`` colour."""

    digits = value.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got '{value}'.")
    red, green, blue = (int(digits[idx : idx + 2], 16) for idx in (0, 2, 4))
    return f"\033[38;2;{red};{green};{blue}m"


def c(text: str, *codes: str) -> str:
    """Wrap ``text`` in one or more escape codes and a trailing reset."""

    prefix = "".join(codes)
    if not prefix:
        return text
    return f"{prefix}{text}{Colors.RESET}"


def supports_color(stream: TextIO, *, force_off: bool = False) -> bool:
    if force_off or os.environ.get("NO_COLOR"):
        return False
    forced = os.environ.get("FORCE_COLOR")
    if forced:
        return forced != "0"
    return bool(getattr(stream, "isatty", lambda: False)())
