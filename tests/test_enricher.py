"""Tests for article publication date lookup."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from blogrss.rss.dates import format_rfc1123, parse_timestamp
from blogrss.rss.enricher import fetch_published_date

ARTICLE_URL = "https://example.com/blog/a"


def article(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


@pytest.mark.asyncio
async def test_meta_property_published_time(make_client):
    """The article:published_time meta property is used as-is."""
    html = article('<meta property="article:published_time" content="2024-01-05T00:00:00Z">')

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2024, 1, 5, tzinfo=timezone.utc)
    assert format_rfc1123(result) == "Fri, 05 Jan 2024 00:00:00 GMT"


@pytest.mark.asyncio
async def test_meta_name_fallback(make_client):
    html = article('<meta name="article:published_time" content="2023-06-30T09:15:00+10:00">')

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2023, 6, 29, 23, 15, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_meta_property_wins_over_time_element(make_client):
    html = article(
        '<meta property="article:published_time" content="2024-02-01T00:00:00Z">',
        '<time datetime="2020-01-01">Jan 1, 2020</time>',
    )

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2024, 2, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_time_datetime_attribute(make_client):
    html = article(body='<time datetime="2024-03-10T12:00:00Z">last Sunday</time>')

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2024, 3, 10, 12, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_time_text_when_no_datetime_attribute(make_client):
    html = article(body="<p>Posted <time>January 5, 2024</time></p><time>2019-01-01</time>")

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2024, 1, 5, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_unparseable_meta_falls_through_to_time(make_client):
    """An invalid meta value is not emitted; the <time> element is tried next."""
    html = article(
        '<meta property="article:published_time" content="not a date">',
        '<time datetime="2024-04-01T08:00:00Z"></time>',
    )

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        result = await fetch_published_date(client, ARTICLE_URL)

    assert result == datetime(2024, 4, 1, 8, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_invalid_time_text_returns_none(make_client):
    html = article(body="<time>not a date</time>")

    async with make_client({ARTICLE_URL: (200, html)}) as client:
        assert await fetch_published_date(client, ARTICLE_URL) is None


@pytest.mark.asyncio
async def test_page_without_dates_returns_none(make_client):
    async with make_client({ARTICLE_URL: (200, article(body="<h1>Hello</h1>"))}) as client:
        assert await fetch_published_date(client, ARTICLE_URL) is None


@pytest.mark.asyncio
async def test_error_status_returns_none(make_client):
    html = article('<meta property="article:published_time" content="2024-01-05T00:00:00Z">')

    async with make_client({ARTICLE_URL: (500, html)}) as client:
        assert await fetch_published_date(client, ARTICLE_URL) is None


@pytest.mark.asyncio
async def test_transport_error_returns_none(make_client):
    """Network failures are swallowed and reported as no date."""
    error = httpx.ConnectError("connection refused")

    async with make_client({ARTICLE_URL: error}) as client:
        assert await fetch_published_date(client, ARTICLE_URL) is None


@pytest.mark.asyncio
async def test_timeout_returns_none(make_client):
    error = httpx.ReadTimeout("timed out")

    async with make_client({ARTICLE_URL: error}) as client:
        assert await fetch_published_date(client, ARTICLE_URL) is None


@pytest.mark.asyncio
async def test_user_agent_is_sent():
    seen_headers = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_headers.append(request.headers.get("user-agent"))
        return httpx.Response(200, text=article())

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(
        transport=transport, headers={"user-agent": "trident-rss/1.0"}
    ) as client:
        await fetch_published_date(client, ARTICLE_URL)

    assert seen_headers == ["trident-rss/1.0"]


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_iso_with_z(self):
        assert parse_timestamp("2024-01-05T00:00:00Z") == datetime(
            2024, 1, 5, tzinfo=timezone.utc
        )

    def test_naive_value_is_utc(self):
        result = parse_timestamp("2024-01-05 10:30")
        assert result == datetime(2024, 1, 5, 10, 30, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_rfc822_value(self):
        assert parse_timestamp("Fri, 05 Jan 2024 00:00:00 GMT") == datetime(
            2024, 1, 5, tzinfo=timezone.utc
        )

    def test_surrounding_whitespace(self):
        assert parse_timestamp("\n  2024-01-05  \n") == datetime(
            2024, 1, 5, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2024-13-45"])
    def test_invalid_values(self, value):
        assert parse_timestamp(value) is None


def test_format_rfc1123_converts_to_gmt():
    dt = datetime(2024, 1, 5, 10, 0, tzinfo=timezone(timedelta(hours=10)))
    assert format_rfc1123(dt) == "Fri, 05 Jan 2024 00:00:00 GMT"
