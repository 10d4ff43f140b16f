"""CLI parser construction for profile-card."""

from __future__ import annotations

import argparse
import math

from profilecard.cli_config import ENV_LOG_LEVEL, ENV_MAX_REDIRECTS, ENV_TIMEOUT
from profilecard.metadata import PROJECT_NAME, TAGLINE, VERSION


def positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Value must be a number.") from exc
    if not math.isfinite(parsed):
        raise argparse.ArgumentTypeError("Value must be a finite number.")
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Value must be greater than zero.")
    return parsed


def non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Value must be an integer.") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Value must not be negative.")
    return parsed


def build_root_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME,
        description=TAGLINE,
        epilog=(
            f"Environment: {ENV_TIMEOUT}, {ENV_MAX_REDIRECTS}, {ENV_LOG_LEVEL}, "
            "NO_COLOR, FORCE_COLOR."
        ),
    )
    parser.add_argument(
        "--card",
        metavar="PATH",
        default=None,
        help="JSON card manifest to render instead of the built-in card.",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=None,
        help="Per-request timeout in seconds.",
    )
    parser.add_argument(
        "--max-redirects",
        type=non_negative_int,
        default=None,
        help="Maximum 302 redirects followed per feed.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the network and show every feed's fallback text.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the card without ANSI colours.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Record DEBUG entries (feed failures included) in the card log.",
    )
    parser.add_argument(
        "--about",
        dest="about_flag",
        action="store_true",
        help="Show project details and exit.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROJECT_NAME} v{VERSION}",
    )
    return parser
