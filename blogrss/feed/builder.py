"""Listing page to RSS document pipeline."""

import logging
from functools import partial

import httpx

from blogrss.config import Settings
from blogrss.rss import enrich_all, extract_links, fetch_published_date, render_feed

logger = logging.getLogger(__name__)


class UpstreamFetchError(Exception):
    """The blog listing page could not be fetched."""

    def __init__(self, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        detail = f"status {status_code}" if status_code is not None else "transport error"
        super().__init__(f"Listing fetch failed for {url}: {detail}")


async def fetch_listing(client: httpx.AsyncClient, url: str) -> str:
    """Fetch the blog listing page.

    Raises:
        UpstreamFetchError: On transport failure or a non-2xx status
    """
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise UpstreamFetchError(url) from exc

    if not response.is_success:
        raise UpstreamFetchError(url, response.status_code)
    return response.text


async def build_feed(client: httpx.AsyncClient, settings: Settings) -> str:
    """Build the RSS document for the configured blog.

    This function:
    1. Fetches the listing page
    2. Extracts candidate article links
    3. Keeps the first ``max_items`` of them
    4. Looks up publication dates with bounded concurrency
    5. Renders the RSS document

    Args:
        client: HTTP client used for the listing and article fetches
        settings: Application settings

    Returns:
        The RSS 2.0 document

    Raises:
        UpstreamFetchError: If the listing page cannot be fetched
    """
    html = await fetch_listing(client, settings.blog_list_url)

    links = extract_links(html, settings.site_origin)
    limited = links[: settings.max_items]
    logger.info(
        "Found %d post links on %s, enriching %d",
        len(links),
        settings.blog_list_url,
        len(limited),
        extra={"url": settings.blog_list_url},
    )

    items = await enrich_all(
        limited,
        partial(fetch_published_date, client),
        concurrency=settings.enrich_concurrency,
    )

    return render_feed(settings.channel(), items)
