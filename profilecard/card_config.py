"""Card definitions: the built-in card and JSON card manifest loading."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from typing import Any

from profilecard.extractor import EXTRACTORS


DEFAULT_WIDTH = 72
DEFAULT_PADDING = 5
DEFAULT_MAX_WRAP_LINES = 2
# Feed values sit three columns in and may gain a trailing ellipsis.
MIN_PADDING = 4
ALLOWED_CONTACT_STYLES = {"plain", "link"}
ALLOWED_LAYOUTS = {"truncate", "wrap"}
HEX_COLOR_REGEX = r"^#[0-9A-Fa-f]{6}$"


class CardConfigError(ValueError):
    """Raised when a card manifest is invalid."""


@dataclass(frozen=True)
class Palette:
    primary: str = "#654FF0"
    secondary: str = "#4FF0B5"
    subtle: str = "#AFB7C0"
    headings: str = "#F04F89"


@dataclass(frozen=True)
class ContactRow:
    icon: str
    label: str
    value: str
    style: str = "plain"


@dataclass(frozen=True)
class FeedSlot:
    key: str
    icon: str
    label: str
    kind: str
    url: str
    fallback: str
    layout: str = "truncate"


@dataclass(frozen=True)
class CardConfig:
    name: str
    contacts: tuple[ContactRow, ...]
    feeds: tuple[FeedSlot, ...]
    footer_command: str
    palette: Palette = Palette()
    width: int = DEFAULT_WIDTH
    padding: int = DEFAULT_PADDING
    max_wrap_lines: int = DEFAULT_MAX_WRAP_LINES

    @property
    def line_length(self) -> int:
        return self.width - self.padding


DEFAULT_CARD = CardConfig(
    name="dale lane",
    contacts=(
        ContactRow(icon="🏢", label="Work", value="Chief Architect @ IBM"),
        ContactRow(icon="🦋", label="Bluesky", value="@dalelane.co.uk"),
        ContactRow(icon="📬", label="Email", value="email@dalelane.co.uk", style="link"),
        ContactRow(icon="🌐", label="Web", value="https://dalelane.co.uk", style="link"),
    ),
    feeds=(
        FeedSlot(
            key="reading",
            icon="📖",
            label="Reading",
            kind="goodreads",
            url="https://www.goodreads.com/user/show/1370155-dale-lane",
            fallback="Books!",
        ),
        FeedSlot(
            key="playing",
            icon="🎮",
            label="Playing",
            kind="backloggd",
            url="https://backloggd-api.vercel.app/user/dalelane",
            fallback="Video games!",
        ),
        FeedSlot(
            key="listening",
            icon="🎹",
            label="Listening",
            kind="lastfm",
            url="https://badges.lastfm.workers.dev/last-played?user=dalelane",
            fallback="Music!",
        ),
        FeedSlot(
            key="saying",
            icon="🤐",
            label="Saying",
            kind="bluesky",
            url="https://bsky.app/profile/did:plc:mecl54mdisxz3xv5da7yxr53/rss",
            fallback="Something interesting",
            layout="wrap",
        ),
    ),
    footer_command="npx dalelane",
)


def load_card_config(path: str) -> CardConfig:
    if not os.path.isfile(path):
        raise CardConfigError(f"Card manifest not found: {os.path.abspath(path)}")

    with open(path, "r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise CardConfigError(f"Invalid JSON in {path}: {exc.msg}") from exc

    return normalize_card(payload, source=path)


def normalize_card(raw: Any, source: str) -> CardConfig:
    if not isinstance(raw, dict):
        raise CardConfigError(f"{source}: top-level json must be an object.")

    name = _require_text(raw.get("name"), f"{source}: name")
    footer_command = _require_text(raw.get("footer_command"), f"{source}: footer_command")

    width = _positive_int(raw.get("width", DEFAULT_WIDTH), f"{source}: width")
    padding = _positive_int(raw.get("padding", DEFAULT_PADDING), f"{source}: padding")
    if not MIN_PADDING <= padding < width:
        raise CardConfigError(f"{source}: padding must be at least {MIN_PADDING} and smaller than width.")
    max_wrap_lines = _positive_int(
        raw.get("max_wrap_lines", DEFAULT_MAX_WRAP_LINES), f"{source}: max_wrap_lines"
    )

    palette = _normalize_palette(raw.get("palette", {}), source)

    contacts_raw = raw.get("contacts", [])
    if not isinstance(contacts_raw, list):
        raise CardConfigError(f"{source}: contacts must be a list.")
    contacts = tuple(
        _normalize_contact(item, f"{source}: contacts[{idx}]") for idx, item in enumerate(contacts_raw)
    )

    feeds_raw = raw.get("feeds")
    if not isinstance(feeds_raw, list) or not feeds_raw:
        raise CardConfigError(f"{source}: feeds must be a non-empty list.")
    feeds = tuple(_normalize_feed(item, f"{source}: feeds[{idx}]") for idx, item in enumerate(feeds_raw))

    keys = [feed.key for feed in feeds]
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise CardConfigError(f"{source}: duplicate feed keys: {', '.join(duplicates)}.")

    return CardConfig(
        name=name,
        contacts=contacts,
        feeds=feeds,
        footer_command=footer_command,
        palette=palette,
        width=width,
        padding=padding,
        max_wrap_lines=max_wrap_lines,
    )


def _normalize_palette(raw: Any, source: str) -> Palette:
    if not isinstance(raw, dict):
        raise CardConfigError(f"{source}: palette must be an object.")

    defaults = Palette()
    values: dict[str, str] = {}
    for field_name in ("primary", "secondary", "subtle", "headings"):
        value = raw.get(field_name, getattr(defaults, field_name))
        if not isinstance(value, str) or not re.match(HEX_COLOR_REGEX, value):
            raise CardConfigError(f"{source}: palette.{field_name} must be a #RRGGBB colour.")
        values[field_name] = value

    unknown = sorted(set(raw) - set(values))
    if unknown:
        raise CardConfigError(f"{source}: unknown palette entries: {', '.join(unknown)}.")
    return Palette(**values)


def _normalize_contact(raw: Any, label: str) -> ContactRow:
    if not isinstance(raw, dict):
        raise CardConfigError(f"{label} must be an object.")

    style = raw.get("style", "plain")
    if style not in ALLOWED_CONTACT_STYLES:
        raise CardConfigError(f"{label}: style must be one of {sorted(ALLOWED_CONTACT_STYLES)}.")

    return ContactRow(
        icon=_require_text(raw.get("icon"), f"{label}.icon"),
        label=_require_text(raw.get("label"), f"{label}.label"),
        value=_require_text(raw.get("value"), f"{label}.value"),
        style=style,
    )


def _normalize_feed(raw: Any, label: str) -> FeedSlot:
    if not isinstance(raw, dict):
        raise CardConfigError(f"{label} must be an object.")

    kind = _require_text(raw.get("kind"), f"{label}.kind")
    if kind not in EXTRACTORS:
        raise CardConfigError(f"{label}: unsupported kind '{kind}'. Supported: {', '.join(sorted(EXTRACTORS))}.")

    url = _require_text(raw.get("url"), f"{label}.url")
    if not url.lower().startswith(("https://", "http://")):
        raise CardConfigError(f"{label}.url must be an http(s) URL.")

    layout = raw.get("layout", "truncate")
    if layout not in ALLOWED_LAYOUTS:
        raise CardConfigError(f"{label}: layout must be one of {sorted(ALLOWED_LAYOUTS)}.")

    feed_label = _require_text(raw.get("label"), f"{label}.label")
    return FeedSlot(
        key=_require_text(raw.get("key", feed_label.lower()), f"{label}.key"),
        icon=_require_text(raw.get("icon"), f"{label}.icon"),
        label=feed_label,
        kind=kind,
        url=url,
        fallback=_require_text(raw.get("fallback"), f"{label}.fallback"),
        layout=layout,
    )


def _require_text(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise CardConfigError(f"{label} must be a non-empty string.")
    return value.strip()


def _positive_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise CardConfigError(f"{label} must be a positive integer.")
    return value
