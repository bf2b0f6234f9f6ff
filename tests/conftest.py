"""Shared fixtures for the blog RSS bridge tests."""

from collections.abc import Callable

import httpx
import pytest

from blogrss.config import Settings

ORIGIN = "https://example.com"
LISTING_URL = f"{ORIGIN}/blog"

Page = tuple[int, str]


def page_transport(pages: dict[str, Page | Exception]) -> httpx.MockTransport:
    """Serve canned pages by URL; unknown URLs get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        page = pages.get(str(request.url), (404, "not found"))
        if isinstance(page, Exception):
            raise page
        status, body = page
        return httpx.Response(status, text=body, headers={"content-type": "text/html"})

    return httpx.MockTransport(handler)


@pytest.fixture
def pages_transport() -> Callable[[dict[str, Page | Exception]], httpx.MockTransport]:
    """Expose page_transport to tests that build their own client."""
    return page_transport


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake example.com blog."""
    return Settings(
        blog_list_url=LISTING_URL,
        site_origin=ORIGIN,
        feed_title="Example Blog",
        feed_desc="Posts from Example",
        feed_link=LISTING_URL,
    )


@pytest.fixture
def make_client() -> Callable[[dict[str, Page | Exception]], httpx.AsyncClient]:
    """Factory for an AsyncClient backed by canned pages."""

    def _make(pages: dict[str, Page | Exception]) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=page_transport(pages),
            headers={"user-agent": "trident-rss/1.0"},
        )

    return _make
