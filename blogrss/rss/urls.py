"""Resolution of listing-page hrefs against the site origin."""

from urllib.parse import urljoin, urlsplit


def resolve_url(reference: str, origin: str) -> str:
    """Resolve a possibly-relative href into an absolute URL.

    Args:
        reference: The href as found in the page
        origin: Site origin used as the base, e.g. ``https://example.com``

    Returns:
        The absolute URL, or ``reference`` unchanged if it cannot be resolved
    """
    try:
        resolved = urljoin(origin, reference.strip())
        parts = urlsplit(resolved)
    except ValueError:
        return reference

    if not parts.scheme or not parts.netloc:
        return reference
    return resolved
