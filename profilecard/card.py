"""Assemble the full bordered card from a card definition and feed values."""

from __future__ import annotations

from collections.abc import Mapping

from profilecard.card_config import CardConfig, ContactRow, FeedSlot
from profilecard.colors import Colors, c, hex_color
from profilecard.formatter import truncate, wrap
from profilecard.renderer import (
    bottom_border,
    clip_to_width,
    divider,
    empty_line,
    render_line,
    thin_divider,
    top_border,
)


FOOTER_PROMPT = "Run"
FOOTER_SUFFIX = "anytime to see this card"
VALUE_INDENT = "   "


def _contact_line(row: ContactRow, label_width: int, card: CardConfig) -> str:
    headings = hex_color(card.palette.headings)
    if row.style == "link":
        value = c(row.value, Colors.BRIGHT_GREEN, Colors.UNDERLINE)
    else:
        value = c(row.value, Colors.WHITE)
    gap = " " * (label_width - len(row.label))
    content = f" {row.icon}  {c(row.label, headings)}{gap} :: {value}"
    return render_line(content, card.width, hex_color(card.palette.primary))


def _feed_lines(feed: FeedSlot, value: str, card: CardConfig) -> list[str]:
    primary = hex_color(card.palette.primary)
    lines = [render_line(f" {feed.icon} {c(feed.label, hex_color(card.palette.headings))}", card.width, primary)]
    if feed.layout == "wrap":
        parts = wrap(value, card.line_length, card.max_wrap_lines)
    else:
        parts = [truncate(value, card.line_length)]
    # Clipped by cells: wide characters count twice.
    for part in parts:
        lines.append(render_line(clip_to_width(VALUE_INDENT + part, card.width), card.width, primary))
    return lines


def _footer_line(card: CardConfig) -> str:
    subtle = hex_color(card.palette.subtle)
    content = (
        f" {c('>', subtle)} {c(FOOTER_PROMPT, subtle)} "
        f"{c(card.footer_command, hex_color(card.palette.secondary))} {c(FOOTER_SUFFIX, subtle)}"
    )
    return render_line(content, card.width, hex_color(card.palette.primary))


def build_card_lines(card: CardConfig, fields: Mapping[str, str]) -> list[str]:
    """Ordered card lines, including the blank first and last lines.

    A feed missing from ``fields`` is shown with its fallback text.
    """

    primary = hex_color(card.palette.primary)
    subtle = hex_color(card.palette.subtle)
    width = card.width

    lines = [
        "",
        top_border(width, primary),
        empty_line(width, primary),
        render_line(" " + c(card.name, primary, Colors.BOLD), width, primary),
        divider(width, primary, subtle),
        empty_line(width, primary),
    ]

    if card.contacts:
        label_width = max(len(row.label) for row in card.contacts)
        lines.extend(_contact_line(row, label_width, card) for row in card.contacts)
        lines.append(empty_line(width, primary))

    lines.append(thin_divider(width, primary, subtle))
    for feed in card.feeds:
        lines.extend(_feed_lines(feed, fields.get(feed.key) or feed.fallback, card))

    lines.extend(
        [
            divider(width, primary, subtle),
            _footer_line(card),
            bottom_border(width, primary),
            "",
        ]
    )
    return lines


def render_card(card: CardConfig, fields: Mapping[str, str]) -> str:
    return "\n".join(build_card_lines(card, fields))
