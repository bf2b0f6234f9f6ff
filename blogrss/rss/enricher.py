"""Best-effort publication date lookup for a single article page."""

import logging
from datetime import datetime

import httpx
from bs4 import BeautifulSoup

from .dates import parse_timestamp

logger = logging.getLogger(__name__)

PUBLISHED_TIME = "article:published_time"


def _meta_published_time(soup: BeautifulSoup) -> datetime | None:
    """Read ``article:published_time`` from a meta tag (property, then name)."""
    for attr in ("property", "name"):
        meta = soup.select_one(f'meta[{attr}="{PUBLISHED_TIME}"]')
        if meta is None:
            continue
        content = meta.get("content")
        if not content:
            continue

        published = parse_timestamp(str(content))
        if published is None:
            logger.debug("Unparseable %s value %r", PUBLISHED_TIME, content)
        return published
    return None


def _time_element(soup: BeautifulSoup) -> datetime | None:
    """Read the first ``<time>`` element: datetime attribute, else its text."""
    element = soup.find("time")
    if element is None:
        return None
    value = element.get("datetime") or element.get_text()
    return parse_timestamp(str(value))


async def fetch_published_date(client: httpx.AsyncClient, url: str) -> datetime | None:
    """Fetch an article page and extract its publication date.

    Tries the ``article:published_time`` meta tag first, then the first
    ``<time>`` element on the page. Never raises: fetch errors, error
    statuses and parse failures all yield None.

    Args:
        client: HTTP client carrying the user-agent header and timeout
        url: Absolute article URL

    Returns:
        UTC-aware publication datetime, or None if none could be found
    """
    try:
        response = await client.get(url)
        if not response.is_success:
            logger.debug(
                "Article fetch %s returned %s",
                url,
                response.status_code,
                extra={"url": url},
            )
            return None

        soup = BeautifulSoup(response.text, "html.parser")
        return _meta_published_time(soup) or _time_element(soup)
    except Exception:
        logger.debug(
            "Could not read publication date from %s",
            url,
            exc_info=True,
            extra={"url": url},
        )
        return None
