"""Central project metadata for profile-card."""

from __future__ import annotations

from datetime import datetime, timezone


PROJECT_NAME = "profile-card"
VERSION = "1.0"
AUTHOR = "dalelane"
CONTACT_EMAIL = "email@dalelane.co.uk"
REPOSITORY_URL = f"https://github.com/{AUTHOR}/{PROJECT_NAME}"
TAGLINE = "Personal business card for the terminal, with live reading/playing/listening/posting feeds"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def about_block() -> str:
    return (
        f"{PROJECT_NAME} v{VERSION}\n"
        f"Author: {AUTHOR}\n"
        f"Contact: {CONTACT_EMAIL}\n"
        f"Repo: {REPOSITORY_URL}\n"
        f"{TAGLINE}"
    )
