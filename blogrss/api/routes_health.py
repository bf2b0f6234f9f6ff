"""Health check endpoints for the blog RSS bridge."""

from fastapi import APIRouter, Depends

from blogrss.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """Liveness probe."""
    return {"ok": True}


@router.get("/readyz")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check endpoint.

    Settings are loaded here, so a bad environment (for example an invalid
    ``MAX_ITEMS``) fails the probe instead of the first feed request.

    Returns:
        Status object with the listing page the feed is built from
    """
    return {"ok": True, "listing": settings.blog_list_url}
