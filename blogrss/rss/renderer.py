"""RSS 2.0 document rendering."""

import re
from collections.abc import Sequence
from datetime import datetime

from .dates import format_rfc1123, utc_now
from .models import ChannelMetadata, FeedItem

# Order matters: "&" first so the other entities are not escaped twice
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


# Characters XML 1.0 does not allow anywhere in a document
_XML_ILLEGAL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def escape_xml(value: object) -> str:
    """Escape text for use inside an XML element.

    Characters that are illegal in XML 1.0 are dropped first.
    """
    text = _XML_ILLEGAL_CHARS.sub("", str(value))
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def _render_item(item: FeedItem) -> str:
    url = escape_xml(item.url)
    return (
        "    <item>\n"
        f"      <title>{escape_xml(item.title)}</title>\n"
        f"      <link>{url}</link>\n"
        f"      <guid>{url}</guid>\n"
        f"      <pubDate>{item.pub_date}</pubDate>\n"
        "    </item>\n"
    )


def render_feed(
    channel: ChannelMetadata,
    items: Sequence[FeedItem],
    now: datetime | None = None,
) -> str:
    """Render channel metadata and items as an RSS 2.0 document.

    Args:
        channel: Title, link and description of the feed
        items: Feed items in output order; may be empty
        now: Build time for ``lastBuildDate`` (default: current time)

    Returns:
        The complete XML document as a string
    """
    last_build = format_rfc1123(now or utc_now())
    body = "".join(_render_item(item) for item in items)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0">\n'
        "  <channel>\n"
        f"    <title>{escape_xml(channel.title)}</title>\n"
        f"    <link>{escape_xml(channel.link)}</link>\n"
        f"    <description>{escape_xml(channel.description)}</description>\n"
        f"    <lastBuildDate>{last_build}</lastBuildDate>\n"
        f"{body}"
        "  </channel>\n"
        "</rss>\n"
    )
