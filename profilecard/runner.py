"""Main runner orchestration for profile-card."""

from __future__ import annotations

import argparse
import asyncio
import math
import os
import sys
from dataclasses import dataclass
from typing import Sequence

from profilecard.card import build_card_lines
from profilecard.card_config import DEFAULT_CARD, CardConfig, CardConfigError, load_card_config
from profilecard.cli_config import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_MAX_REDIRECTS,
    ENV_TIMEOUT,
)
from profilecard.cli_parsers import build_root_parser
from profilecard.colors import Colors, c
from profilecard.metadata import about_block
from profilecard.output import active_log_level, append_card_log, emit_card, set_log_level
from profilecard.sources import collect_fields, fallback_fields


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class RuntimeSettings:
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_redirects: int = DEFAULT_MAX_REDIRECTS


def _env_number(name: str, cast, default):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got '{raw}'.") from exc
    if not math.isfinite(value) or value < 0 or (cast is float and value == 0):
        raise ValueError(f"{name} is out of range: '{raw}'.")
    return value


def resolve_runtime(args: argparse.Namespace) -> RuntimeSettings:
    """Flags win over environment variables, which win over defaults."""

    timeout = args.timeout
    if timeout is None:
        timeout = _env_number(ENV_TIMEOUT, float, DEFAULT_TIMEOUT_SECONDS)
    max_redirects = args.max_redirects
    if max_redirects is None:
        max_redirects = _env_number(ENV_MAX_REDIRECTS, int, DEFAULT_MAX_REDIRECTS)
    return RuntimeSettings(timeout_seconds=timeout, max_redirects=max_redirects)


def _print_error(message: str) -> None:
    print(c(message, Colors.RED), file=sys.stderr)


async def render_profile_card(
    card: CardConfig,
    settings: RuntimeSettings,
    *,
    offline: bool = False,
    no_color: bool = False,
) -> int:
    append_card_log("card_start", f"name={card.name} feeds={len(card.feeds)} offline={offline}")
    if offline:
        fields = fallback_fields(card)
    else:
        fields = await collect_fields(
            card,
            timeout_seconds=settings.timeout_seconds,
            max_redirects=settings.max_redirects,
        )

    emit_card(build_card_lines(card, fields), no_color=no_color)
    fallbacks = sum(1 for feed in card.feeds if fields.get(feed.key) == feed.fallback)
    append_card_log("card_done", f"name={card.name} fallbacks={fallbacks}")
    return EXIT_SUCCESS


async def run(argv: Sequence[str] | None = None) -> int:
    parser = build_root_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as exc:
        return EXIT_SUCCESS if exc.code in (0, None) else EXIT_USAGE

    if args.about_flag:
        print(c(about_block(), Colors.CYAN))
        return EXIT_SUCCESS

    try:
        set_log_level("DEBUG" if args.debug else None)
        active_log_level()
        settings = resolve_runtime(args)
        card = DEFAULT_CARD
        if args.card:
            card = load_card_config(args.card)
            # Static rows must fit before any feed is fetched.
            build_card_lines(card, fallback_fields(card))
    except (CardConfigError, ValueError) as exc:
        _print_error(f"[!] {exc}")
        return EXIT_USAGE

    return await render_profile_card(card, settings, offline=args.offline, no_color=args.no_color)


def main() -> None:
    try:
        raise SystemExit(asyncio.run(run()))
    except KeyboardInterrupt:
        raise SystemExit(130)
