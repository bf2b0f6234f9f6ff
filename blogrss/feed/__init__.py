"""Feed building pipeline."""

from .builder import UpstreamFetchError, build_feed

__all__ = ["UpstreamFetchError", "build_feed"]
