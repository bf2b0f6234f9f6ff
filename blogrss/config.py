"""Configuration management for the blog RSS bridge."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogrss.rss.models import ChannelMetadata


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The listing and channel fields keep their unprefixed variable names
    (``BLOG_LIST_URL``, ``FEED_TITLE``...); everything else uses ``RSS_``.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RSS_", extra="ignore", populate_by_name=True
    )

    # Upstream blog
    blog_list_url: str = Field(
        default="https://tridentaccounting.com.au/blog", validation_alias="BLOG_LIST_URL"
    )
    site_origin: str = Field(
        default="https://tridentaccounting.com.au", validation_alias="SITE_ORIGIN"
    )

    # Channel metadata
    feed_title: str = Field(default="Trident Accounting Blog", validation_alias="FEED_TITLE")
    feed_desc: str = Field(
        default="Insights and updates from Trident Accounting", validation_alias="FEED_DESC"
    )
    feed_link: str = Field(
        default="https://tridentaccounting.com.au/blog", validation_alias="FEED_LINK"
    )

    # Outbound fetches
    user_agent: str = "trident-rss/1.0"
    fetch_timeout_seconds: float = Field(default=15.0, gt=0)

    # Feed settings
    max_items: int = Field(default=15, ge=1, le=100)
    enrich_concurrency: int = Field(default=5, ge=1, le=20)

    # Downstream cache hints
    cache_s_maxage: int = Field(default=900, ge=0)  # 15 minutes
    cache_stale_while_revalidate: int = Field(default=300, ge=0)

    # Optional per-client limit in slowapi syntax, e.g. "120/minute"; off when empty
    rate_limit: str = ""

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    def channel(self) -> ChannelMetadata:
        """Build the feed channel metadata from the configured values."""
        return ChannelMetadata(
            title=self.feed_title,
            description=self.feed_desc,
            link=self.feed_link,
        )

    @property
    def cache_control(self) -> str:
        """Cache-Control header value for successful feed responses."""
        return (
            f"public, s-maxage={self.cache_s_maxage}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
