"""Fit free-text feed values into the card's fixed column width."""

from __future__ import annotations


ELLIPSIS = "…"
DEFAULT_MAX_LINES = 2


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis.

    No word-boundary handling: the cut may land mid-word.
    """

    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def wrap(text: str, limit: int, max_lines: int = DEFAULT_MAX_LINES) -> list[str]:
    """Word-wrap ``text`` over at most ``max_lines`` lines of ``limit`` characters.

    Lines break at the last space at or before ``limit``, or hard-break at
    ``limit`` when the head of the text has no space. When text is left over
    after ``max_lines`` lines, a final line holding only an ellipsis is added.
    """

    lines: list[str] = []
    remaining = text.strip().replace("\n", "")

    while remaining and len(lines) < max_lines:
        if len(remaining) <= limit:
            lines.append(remaining)
            remaining = ""
            break

        split_at = remaining.rfind(" ", 0, limit + 1)
        if split_at == -1:
            split_at = limit
        lines.append(remaining[:split_at].strip())
        remaining = remaining[split_at:].strip()

    if remaining:
        lines.append(ELLIPSIS)
    return lines
