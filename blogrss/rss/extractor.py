"""Heuristic extraction of article links from a blog listing page."""

from bs4 import BeautifulSoup, Tag

from .models import CandidateLink
from .urls import resolve_url

# Anchors pointing somewhere under /blog/ are treated as posts. This matches
# the usual card/grid markup of site builders without knowing the layout.
POST_LINK_SELECTOR = "a[href*='/blog/']"
HEADING_SELECTOR = "h1, h2, h3, h4"
LISTING_PATHS = frozenset({"/blog", "/blog/"})


def _anchor_title(anchor: Tag) -> str | None:
    """Derive a display title from an anchor, or None if it has none."""
    title = anchor.get_text().strip()
    if title:
        return title

    heading = anchor.select_one(HEADING_SELECTOR)
    if heading is not None:
        title = heading.get_text().strip()
    return title or None


def extract_links(html: str, origin: str) -> list[CandidateLink]:
    """Find candidate article links on a listing page.

    Anchors are visited in document order. An anchor is skipped when it has
    no href, links to the listing page itself, resolves to a URL already
    seen, or has no usable title.

    Args:
        html: Raw HTML of the listing page
        origin: Site origin used to resolve relative hrefs

    Returns:
        Deduplicated list of CandidateLink objects in document order
    """
    soup = BeautifulSoup(html, "html.parser")

    seen: set[str] = set()
    links: list[CandidateLink] = []
    for anchor in soup.select(POST_LINK_SELECTOR):
        href = anchor.get("href")
        if not href or not isinstance(href, str):
            continue

        if href in LISTING_PATHS:
            continue

        url = resolve_url(href, origin)
        if url in seen:
            continue
        seen.add(url)

        title = _anchor_title(anchor)
        if title is None:
            continue

        links.append(CandidateLink(title=title, url=url))

    return links
