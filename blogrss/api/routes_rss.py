"""RSS feed endpoint for the blog RSS bridge."""

import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from blogrss.api.dependencies import get_http_client
from blogrss.config import Settings, get_settings
from blogrss.feed import UpstreamFetchError, build_feed

logger = logging.getLogger(__name__)

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"
# The endpoint ignores the request method
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(prefix="/api", tags=["rss"])


@router.api_route("/rss", methods=ALL_METHODS)
@router.api_route("/rss.xml", methods=ALL_METHODS)
async def get_rss(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Serve the blog as an RSS 2.0 feed.

    Returns:
        200 with the RSS document and cache headers,
        502 if the listing page could not be fetched,
        500 on any other failure
    """
    try:
        xml = await build_feed(client, settings)
    except UpstreamFetchError as exc:
        logger.warning("%s", exc, extra={"url": exc.url})
        return PlainTextResponse("Upstream blog fetch failed", status_code=502)
    except Exception:
        logger.exception("RSS generation failed")
        return PlainTextResponse("RSS generator error", status_code=500)

    return Response(
        content=xml,
        status_code=200,
        media_type=RSS_MEDIA_TYPE,
        headers={"Cache-Control": settings.cache_control},
    )
