import asyncio

import aiohttp

from profilecard.card_config import CardConfig, FeedSlot
from profilecard.cli_config import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT_SECONDS
from profilecard.extractor import EXTRACTORS
from profilecard.fetcher import FetchError, fetch_text
from profilecard.output import append_card_log


async def fetch_display_field(
    session: aiohttp.ClientSession,
    feed: FeedSlot,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> str:
    """Return the feed's display string, or its fallback when anything fails.

    Never raises for transport or parse failures; those are only recorded in
    the card log at DEBUG level.
    """

    try:
        body = await fetch_text(
            session,
            feed.url,
            timeout_seconds=timeout_seconds,
            max_redirects=max_redirects,
        )
    except FetchError as exc:
        append_card_log("feed_fetch_failed", f"feed={feed.key} reason={exc}", level="DEBUG")
        return feed.fallback

    value = EXTRACTORS[feed.kind](body)
    if not value:
        append_card_log("feed_parse_failed", f"feed={feed.key} kind={feed.kind}", level="DEBUG")
        return feed.fallback

    append_card_log("feed_resolved", f"feed={feed.key} chars={len(value)}", level="DEBUG")
    return value


def fallback_fields(card: CardConfig) -> dict[str, str]:
    return {feed.key: feed.fallback for feed in card.feeds}


async def collect_fields(
    card: CardConfig,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> dict[str, str]:
    """Fetch every feed concurrently and map each result to its feed key.

    Returns only once every feed has settled; each one resolves to a string.
    """

    async with aiohttp.ClientSession(trust_env=True) as session:
        tasks = [
            fetch_display_field(
                session,
                feed,
                timeout_seconds=timeout_seconds,
                max_redirects=max_redirects,
            )
            for feed in card.feeds
        ]
        values = await asyncio.gather(*tasks)
    return dict(zip((feed.key for feed in card.feeds), values))
