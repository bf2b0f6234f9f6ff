"""FastAPI dependencies for API routers."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends

from blogrss.config import Settings, get_settings


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency yielding an outbound HTTP client for one request.

    The client sends the configured user-agent on every request, follows
    redirects and applies the configured timeout.

    Yields:
        Async httpx client, closed when the request finishes
    """
    async with httpx.AsyncClient(
        headers={"user-agent": settings.user_agent},
        timeout=settings.fetch_timeout_seconds,
        follow_redirects=True,
    ) as client:
        yield client
