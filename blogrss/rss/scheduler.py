"""Bounded-concurrency date enrichment of candidate links."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from datetime import datetime

from .dates import format_rfc1123, utc_now
from .models import CandidateLink, FeedItem

logger = logging.getLogger(__name__)

DateFetcher = Callable[[str], Awaitable[datetime | None]]


async def enrich_all(
    links: Sequence[CandidateLink],
    fetch_date: DateFetcher,
    concurrency: int = 5,
    clock: Callable[[], datetime] = utc_now,
) -> list[FeedItem]:
    """Attach a publication date to every link.

    Runs ``concurrency`` worker coroutines over a shared cursor. Each worker
    claims the next index, awaits ``fetch_date`` for it and fills that slot,
    so the output keeps input order whatever order the fetches finish in.
    Links without a date get ``clock()`` instead.

    Args:
        links: Links to enrich, in feed order
        fetch_date: Coroutine function returning a datetime or None for a URL
        concurrency: Maximum number of fetches in flight at once (default: 5)
        clock: Source of the fallback timestamp

    Returns:
        FeedItem list with the same length and order as ``links``

    Raises:
        ValueError: If concurrency is less than 1
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")

    results: list[FeedItem | None] = [None] * len(links)
    cursor = 0

    async def worker() -> None:
        nonlocal cursor
        while cursor < len(links):
            # Claim and advance with no await in between
            idx = cursor
            cursor += 1
            link = links[idx]

            try:
                published = await fetch_date(link.url)
            except Exception:
                logger.warning(
                    "Date lookup failed for %s",
                    link.url,
                    exc_info=True,
                    extra={"url": link.url},
                )
                published = None

            results[idx] = FeedItem(
                title=link.title,
                url=link.url,
                pub_date=format_rfc1123(published or clock()),
            )

    await asyncio.gather(*(worker() for _ in range(min(concurrency, len(links)))))

    return [item for item in results if item is not None]
