"""Log location utilities for profile-card."""

from __future__ import annotations

import os
from pathlib import Path

from profilecard.cli_config import ENV_HOME


def card_home() -> Path:
    configured = os.environ.get(ENV_HOME, "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".profile-card"


def log_dir() -> Path:
    return card_home() / "logs"


def card_log_path() -> Path:
    return log_dir() / "card.log.txt"


def ensure_log_dir() -> Path:
    path = log_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path
