"""Card emission and the levelled card log."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from profilecard.cli_config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_LEVELS
from profilecard.colors import supports_color
from profilecard.metadata import utc_timestamp
from profilecard.renderer import strip_ansi
from profilecard.storage import card_log_path, ensure_log_dir


_active_level: str | None = None


def normalize_level(level: str) -> str:
    value = level.strip().upper()
    if value == "WARNING":
        value = "WARN"
    if value not in LOG_LEVELS:
        allowed = ", ".join(LOG_LEVELS)
        raise ValueError(f"Unknown log level '{level}'. Supported levels: {allowed}.")
    return value


def set_log_level(level: str | None) -> None:
    """Pin the log threshold; ``None`` falls back to the environment."""

    global _active_level
    _active_level = normalize_level(level) if level is not None else None


def active_log_level() -> str:
    if _active_level is not None:
        return _active_level
    return normalize_level(os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL)


def append_card_log(event: str, details: str = "", *, level: str = "INFO") -> str | None:
    """Append one line to the card log.

    The entry is dropped when it is below the threshold or the log cannot be
    written; a log failure never interrupts rendering the card.
    """

    level = normalize_level(level)
    if LOG_LEVELS[level] < LOG_LEVELS[active_log_level()]:
        return None

    path = card_log_path()
    line = f"[{utc_timestamp()}] [{level}] {event}"
    if details:
        line = f"{line} | {details}"
    try:
        ensure_log_dir()
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    except OSError:
        return None
    return str(path)


def emit_card(lines: list[str], *, stream: TextIO | None = None, no_color: bool = False) -> None:
    target = stream if stream is not None else sys.stdout
    text = "\n".join(lines)
    if not supports_color(target, force_off=no_color):
        text = strip_ansi(text)
    target.write(text + "\n")
    target.flush()
