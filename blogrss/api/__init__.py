"""API routers for the blog RSS bridge."""

from blogrss.api.routes_health import router as health_router
from blogrss.api.routes_rss import router as rss_router

__all__ = [
    "health_router",
    "rss_router",
]
