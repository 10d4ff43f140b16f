import asyncio
from urllib.parse import urljoin

import aiohttp

from profilecard.cli_config import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT_SECONDS


HEADERS = {"User-Agent": "Mozilla/5.0 (X11; Linux x86_64)"}


class FetchError(RuntimeError):
    """Raised when a feed URL cannot be turned into a response body."""


async def fetch_text(
    session: aiohttp.ClientSession,
    url: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> str:
    """GET ``url`` and return the body, following up to ``max_redirects`` 302s.

    Only 200 is accepted as a final status. Any other outcome raises
    :class:`FetchError`.
    """

    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    current_url = url
    hops = 0
    while True:
        try:
            async with session.get(
                current_url,
                headers=HEADERS,
                allow_redirects=False,
                timeout=timeout,
            ) as response:
                if response.status == 302:
                    location = response.headers.get("Location")
                    if not location:
                        raise FetchError(f"302 without Location from {current_url}")
                    redirect_url = urljoin(current_url, location)
                elif response.status != 200:
                    raise FetchError(f"status code {response.status} from {current_url}")
                else:
                    return await response.text()
        except asyncio.TimeoutError as exc:
            raise FetchError(f"Timeout after {timeout_seconds}s fetching {current_url}") from exc
        except aiohttp.ClientError as exc:
            raise FetchError(f"Network error fetching {current_url}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise FetchError(f"Undecodable body from {current_url}") from exc

        hops += 1
        if hops > max_redirects:
            raise FetchError(f"Too many redirects (>{max_redirects}) starting from {url}")
        current_url = redirect_url
