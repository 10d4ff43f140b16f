"""Fixed-width bordered line primitives for the card."""

from __future__ import annotations

import re
import unicodedata

from profilecard.colors import Colors, c
from profilecard.formatter import ELLIPSIS


ANSI_SGR_REGEX = re.compile(r"\x1b\[\d+(?:;\d+)*m")

BORDER_VERTICAL = "│"
BORDER_HORIZONTAL = "─"
CORNER_TOP_LEFT = "╭"
CORNER_TOP_RIGHT = "╮"
CORNER_BOTTOM_LEFT = "╰"
CORNER_BOTTOM_RIGHT = "╯"
DIVIDER_GLYPH = "━"
THIN_DIVIDER_GLYPH = "-"


class CardLayoutError(ValueError):
    """Raised when content is wider than the card it is placed on."""


def strip_ansi(text: str) -> str:
    return ANSI_SGR_REGEX.sub("", text)


def _cell_width(char: str) -> int:
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in {"W", "F"}:
        return 2
    return 1


def visible_length(text: str) -> int:
    """Terminal cells taken by ``text`` once styling sequences are removed."""

    return sum(_cell_width(char) for char in strip_ansi(text))


def clip_to_width(text: str, width: int, marker: str = ELLIPSIS) -> str:
    """Cut plain ``text`` so it fits in ``width`` cells, ending with ``marker`` when cut."""

    if visible_length(text) <= width:
        return text
    budget = width - visible_length(marker)
    used = 0
    kept: list[str] = []
    for char in text:
        cells = _cell_width(char)
        if used + cells > budget:
            break
        kept.append(char)
        used += cells
    return "".join(kept) + marker


def render_line(content: str, width: int, border: str = "") -> str:
    """Place ``content`` between two border glyphs, right-padded to ``width``.

    ``border`` is the escape code the border glyphs are painted with.
    """

    padding = width - visible_length(content)
    if padding < 0:
        raise CardLayoutError(
            f"Line content is {visible_length(content)} cells wide; the card holds {width}."
        )
    edge = c(BORDER_VERTICAL, border)
    return f"{edge}{content}{' ' * padding}{edge}"


def top_border(width: int, border: str = "") -> str:
    return c(CORNER_TOP_LEFT + BORDER_HORIZONTAL * width + CORNER_TOP_RIGHT, border)


def bottom_border(width: int, border: str = "") -> str:
    return c(CORNER_BOTTOM_LEFT + BORDER_HORIZONTAL * width + CORNER_BOTTOM_RIGHT, border)


def empty_line(width: int, border: str = "") -> str:
    return render_line(" " * width, width, border)


def divider(width: int, border: str = "", rule: str = Colors.GREY) -> str:
    return render_line(" " + c(DIVIDER_GLYPH * (width - 2), rule) + " ", width, border)


def thin_divider(width: int, border: str = "", rule: str = Colors.GREY) -> str:
    return render_line(" " + c(THIN_DIVIDER_GLYPH * (width - 2), rule) + " ", width, border)
