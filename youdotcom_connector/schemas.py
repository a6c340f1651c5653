"""
Pydantic schemas for the You.com Search and Contents APIs.

Every scalar is a strict type, so nothing is coerced between types. Options
models drop unknown keys; response models are open (``extra="allow"``) so
fields the upstream API adds later survive validation.
"""

from typing import Any, Dict, List, Literal, Optional
from urllib.parse import urlsplit

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_validator,
)
from pydantic_core import PydanticCustomError

Freshness = Literal["day", "week", "month", "year"]
LivecrawlScope = Literal["web", "news", "all"]
LivecrawlFormat = Literal["html", "markdown"]
SafeSearch = Literal["off", "moderate", "strict"]
ContentFormat = Literal["markdown", "html", "metadata"]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class SearchOptions(BaseModel):
    """Search operation options from the node's Search Options collection."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    count: Optional[StrictInt] = Field(None, ge=1, le=100, description="Number of search results to return (1-100)")
    country: Optional[StrictStr] = Field(None, description="Two-letter country code to filter results (e.g. US, GB)")
    freshness: Optional[Freshness] = Field(None, description="Filter results by recency")
    language: Optional[StrictStr] = Field(None, description="BCP 47 language code to filter results (e.g. EN, DE)")
    livecrawl: Optional[LivecrawlScope] = Field(None, description="Type of content to crawl in real-time")
    livecrawl_formats: Optional[LivecrawlFormat] = Field(None, description="Format for live-crawled content")
    offset: Optional[StrictInt] = Field(None, ge=0, le=9, description="Pagination offset in multiples of count (0-9)")
    safesearch: Optional[SafeSearch] = Field(None, description="Safe search filtering level")


class WebResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: StrictStr
    title: StrictStr
    description: StrictStr
    snippets: Optional[List[StrictStr]] = None
    page_age: Optional[StrictStr] = None


class NewsResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: StrictStr
    title: StrictStr
    description: StrictStr
    page_age: Optional[StrictStr] = None


class SearchMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    search_uuid: Optional[StrictStr] = None
    query: Optional[StrictStr] = None
    latency: Optional[StrictFloat] = None


class SearchResults(BaseModel):
    model_config = ConfigDict(extra="allow")

    web: Optional[List[WebResult]] = None
    news: Optional[List[NewsResult]] = None


class SearchResponse(BaseModel):
    """Response body of ``GET /v1/search``."""
    model_config = ConfigDict(extra="allow")

    results: SearchResults
    metadata: Optional[SearchMetadata] = None


# ---------------------------------------------------------------------------
# Contents
# ---------------------------------------------------------------------------

class ContentsOptions(BaseModel):
    """Contents operation options from the node's Contents Options collection."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    formats: Optional[List[ContentFormat]] = Field(None, description="Output formats for extracted content")
    crawl_timeout: Optional[StrictInt] = Field(None, ge=1, le=60, description="Timeout in seconds for content crawling (1-60)")

    @field_validator("formats")
    @classmethod
    def _unique_formats(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        # ordered set
        if v is None:
            return v
        return list(dict.fromkeys(v))


class ContentsResult(BaseModel):
    """One extracted page from ``POST /v1/contents``."""
    model_config = ConfigDict(extra="allow")

    url: StrictStr
    markdown: Optional[StrictStr] = None
    html: Optional[StrictStr] = None
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if not parts.scheme or not parts.netloc:
            raise PydanticCustomError("invalid_url", "Invalid url")
        return v


ContentsResponse = TypeAdapter(List[ContentsResult])
