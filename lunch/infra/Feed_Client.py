"""HTTP fetch of the raw menu feed.

Every failure collapses to empty bytes: the caller words a transport error and
an empty body the same way ("problem connecting, try again later"). No retries.
"""
import logging
from typing import Awaitable, Callable, Optional

import httpx

from lunch.utilities.config import FEED_TIMEOUT_SECONDS, FEED_URL

logger = logging.getLogger(__name__)

FeedFetcher = Callable[[], Awaitable[bytes]]


async def fetch_raw_feed(url: str = FEED_URL, timeout: float = FEED_TIMEOUT_SECONDS,
                         transport: Optional[httpx.AsyncBaseTransport] = None) -> bytes:
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # InvalidURL (a bad LUNCH_FEED_URL) is not an HTTPError subclass
        logger.warning(f"Menu feed fetch failed: {e!r}")
        return b""

    if response.status_code != 200:
        logger.warning(f"Menu feed returned HTTP {response.status_code}")
        return b""
    if not response.content:
        logger.warning("Menu feed returned an empty body")
    return response.content


async def fetch_or_empty(fetch_feed: FeedFetcher) -> bytes:
    """Run any injected fetcher; whatever it raises becomes empty bytes."""
    try:
        return await fetch_feed()
    except Exception:
        logger.exception("Menu feed fetcher raised")
        return b""
