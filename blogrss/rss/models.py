"""Pydantic models for discovered links and feed items."""

from pydantic import BaseModel, ConfigDict, Field


class CandidateLink(BaseModel):
    """An article link discovered on the blog listing page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    url: str


class FeedItem(CandidateLink):
    """A candidate link with its publication date, ready to render."""

    pub_date: str


class ChannelMetadata(BaseModel):
    """Channel-level fields of the RSS document."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    link: str
