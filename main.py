"""Blog RSS bridge - Main application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from blogrss.api import health_router, rss_router
from blogrss.config import Settings, get_settings
from blogrss.logging import setup_logging


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        # Prevent MIME type sniffing of the XML and plain-text bodies
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


async def invalid_settings_handler(request: Request, exc: ValidationError):
    """Answer requests that fail on a broken environment with a plain 500."""
    return PlainTextResponse("RSS generator error", status_code=500)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    setup_logging()
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings used for app-level wiring (default: get_settings())
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Blog RSS Bridge",
        description="Serve a blog listing page as an RSS 2.0 feed",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiting is opt-in; by default feed readers never see a 429
    if settings.rate_limit:
        limiter = Limiter(
            key_func=get_remote_address, default_limits=[settings.rate_limit]
        )
        app.state.limiter = limiter
        app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
        app.add_middleware(SlowAPIMiddleware)

    # Settings are validated lazily, inside request dependencies
    app.add_exception_handler(ValidationError, invalid_settings_handler)

    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(health_router)
    app.include_router(rss_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
