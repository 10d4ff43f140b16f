import json
import re
from html import unescape

GOODREADS_DESCRIPTION_REGEX = r"<meta\s+name=[\"']description[\"']\s+content=[\"'](.*?)[\"']\s*/?>"
TITLE_REGEX = r"<title>(.*?)</title>"
RSS_ITEM_REGEX = r"<item>.*?</item>"
RSS_DESCRIPTION_REGEX = r"<description>(.*?)</description>"
READING_PREFIX = "currently reading "
LISTENING_PREFIX = "last played: "


def clean(text):
    if text is None:
        return None
    normalized = unescape(text).strip()
    return normalized or None


def _after_prefix(content, prefix):
    index = content.lower().find(prefix)
    if index == -1:
        return content
    return content[index + len(prefix):]


def extract_reading(payload):
    """Book title from a goodreads profile page's meta description."""
    match = re.search(GOODREADS_DESCRIPTION_REGEX, payload, re.I)
    if not match or not match.group(1):
        return None
    return clean(_after_prefix(match.group(1), READING_PREFIX))


def extract_listening(payload):
    match = re.search(TITLE_REGEX, payload)
    if not match or not match.group(1):
        return None
    return clean(_after_prefix(match.group(1), LISTENING_PREFIX))


def extract_playing(payload):
    """Most recently played game name from the backloggd user API."""
    try:
        name = json.loads(payload)["content"]["recentlyPlayed"][0]["name"]
    except (ValueError, KeyError, IndexError, TypeError):
        return None
    if not isinstance(name, str):
        return None
    return clean(name)


def extract_latest_post(payload):
    """Description of the first ``<item>`` in an RSS feed."""
    item = re.search(RSS_ITEM_REGEX, payload, re.S)
    if not item:
        return None
    description = re.search(RSS_DESCRIPTION_REGEX, item.group(0), re.S)
    if not description:
        return None
    return clean(description.group(1))


EXTRACTORS = {
    "goodreads": extract_reading,
    "backloggd": extract_playing,
    "lastfm": extract_listening,
    "bluesky": extract_latest_post,
}
