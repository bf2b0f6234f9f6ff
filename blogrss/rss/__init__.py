"""Link extraction, date enrichment and RSS rendering."""

from .enricher import fetch_published_date
from .extractor import extract_links
from .models import CandidateLink, ChannelMetadata, FeedItem
from .renderer import escape_xml, render_feed
from .scheduler import enrich_all
from .urls import resolve_url

__all__ = [
    "CandidateLink",
    "ChannelMetadata",
    "FeedItem",
    "enrich_all",
    "escape_xml",
    "extract_links",
    "fetch_published_date",
    "render_feed",
    "resolve_url",
]
