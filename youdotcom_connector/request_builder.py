"""Translate validated options into You.com API request descriptions."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import __version__
from .config import DEFAULT_BASE_URL
from .exceptions import OperationInputError
from .schemas import ContentsOptions, SearchOptions

SEARCH_PATH = "/v1/search"
CONTENTS_PATH = "/v1/contents"

USER_AGENT = f"n8n-nodes-youdotcom/{__version__} (https://github.com/youdotcom-oss/n8n-nodes-youdotcom)"

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "User-Agent": USER_AGENT,
}

# SearchOptions field -> query string key
SEARCH_PARAM_KEYS = (
    "count",
    "country",
    "freshness",
    "language",
    "livecrawl",
    "livecrawl_formats",
    "offset",
    "safesearch",
)


@dataclass(frozen=True)
class RequestSpec:
    """Outbound HTTP request, minus authentication."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    params: Optional[Dict[str, Any]] = None
    json: Optional[Dict[str, Any]] = None


def build_search_request(query: str, options: SearchOptions,
                         base_url: str = DEFAULT_BASE_URL) -> RequestSpec:
    """GET /v1/search with the query and every option the caller set.

    The query is sent verbatim; operators such as ``site:`` or ``filetype:``
    are interpreted upstream.
    """
    if not isinstance(query, str) or not query.strip():
        raise OperationInputError("A search query is required")

    params: Dict[str, Any] = {"query": query}
    # exclude_none keeps explicit zeros (offset=0) while dropping unset fields
    present = options.model_dump(exclude_none=True)
    for key in SEARCH_PARAM_KEYS:
        if key in present:
            params[key] = present[key]

    return RequestSpec(method="GET", url=f"{base_url}{SEARCH_PATH}", params=params)


def parse_urls(urls: str) -> List[str]:
    """Split a comma-separated URL string, trimming and dropping blanks."""
    return [u.strip() for u in urls.split(",") if u.strip()]


def build_contents_request(urls: str, options: ContentsOptions,
                           base_url: str = DEFAULT_BASE_URL) -> RequestSpec:
    """POST /v1/contents for the URLs in a comma-separated string."""
    url_list = parse_urls(urls) if isinstance(urls, str) else []
    if not url_list:
        raise OperationInputError("At least one URL is required")

    body: Dict[str, Any] = {"urls": url_list}
    if options.formats:
        body["formats"] = list(options.formats)
    if options.crawl_timeout is not None:
        body["crawl_timeout"] = options.crawl_timeout

    return RequestSpec(method="POST", url=f"{base_url}{CONTENTS_PATH}", json=body)
