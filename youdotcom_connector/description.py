"""
Declarative parameter schema for the You.com node.

Plain data consumed by the host's configuration editor: operation selector,
per-operation fields, option catalogs and request defaults.
"""

from typing import Any, Dict, List, Tuple

from .config import DEFAULT_BASE_URL
from .request_builder import DEFAULT_HEADERS

# (display name, API value); "" is the form's "Any" choice and is never sent
COUNTRIES: List[Tuple[str, str]] = [
    ("Argentina", "AR"),
    ("Australia", "AU"),
    ("Austria", "AT"),
    ("Belgium", "BE"),
    ("Brazil", "BR"),
    ("Canada", "CA"),
    ("Chile", "CL"),
    ("China", "CN"),
    ("Denmark", "DK"),
    ("Finland", "FI"),
    ("France", "FR"),
    ("Germany", "DE"),
    ("Hong Kong", "HK"),
    ("India", "IN"),
    ("Indonesia", "ID"),
    ("Italy", "IT"),
    ("Japan", "JP"),
    ("Malaysia", "MY"),
    ("Mexico", "MX"),
    ("Netherlands", "NL"),
    ("New Zealand", "NZ"),
    ("Norway", "NO"),
    ("Philippines", "PH"),
    ("Poland", "PL"),
    ("Portugal", "PT"),
    ("Russia", "RU"),
    ("Saudi Arabia", "SA"),
    ("South Africa", "ZA"),
    ("South Korea", "KR"),
    ("Spain", "ES"),
    ("Sweden", "SE"),
    ("Switzerland", "CH"),
    ("Taiwan", "TW"),
    ("Turkey", "TR"),
    ("United Kingdom", "GB"),
    ("United States", "US"),
]

LANGUAGES: List[Tuple[str, str]] = [
    ("Arabic", "AR"),
    ("Bengali", "BN"),
    ("Bulgarian", "BG"),
    ("Catalan", "CA"),
    ("Chinese (Simplified)", "ZH-HANS"),
    ("Chinese (Traditional)", "ZH-HANT"),
    ("Croatian", "HR"),
    ("Czech", "CS"),
    ("Danish", "DA"),
    ("Dutch", "NL"),
    ("English", "EN"),
    ("English (UK)", "EN-GB"),
    ("Estonian", "ET"),
    ("Finnish", "FI"),
    ("French", "FR"),
    ("Galician", "GL"),
    ("German", "DE"),
    ("Greek", "EL"),
    ("Gujarati", "GU"),
    ("Hebrew", "HE"),
    ("Hindi", "HI"),
    ("Hungarian", "HU"),
    ("Icelandic", "IS"),
    ("Italian", "IT"),
    ("Japanese", "JP"),
    ("Kannada", "KN"),
    ("Korean", "KO"),
    ("Latvian", "LV"),
    ("Lithuanian", "LT"),
    ("Malay", "MS"),
    ("Malayalam", "ML"),
    ("Marathi", "MR"),
    ("Norwegian", "NB"),
    ("Polish", "PL"),
    ("Portuguese (Brazil)", "PT-BR"),
    ("Portuguese (Portugal)", "PT-PT"),
    ("Punjabi", "PA"),
    ("Romanian", "RO"),
    ("Russian", "RU"),
    ("Serbian", "SR"),
    ("Slovak", "SK"),
    ("Slovenian", "SL"),
    ("Spanish", "ES"),
    ("Swedish", "SV"),
    ("Tamil", "TA"),
    ("Telugu", "TE"),
    ("Thai", "TH"),
    ("Turkish", "TR"),
    ("Ukrainian", "UK"),
    ("Vietnamese", "VI"),
]

FRESHNESS: List[Tuple[str, str]] = [
    ("Any Time", ""),
    ("Past Day", "day"),
    ("Past Month", "month"),
    ("Past Week", "week"),
    ("Past Year", "year"),
]

LIVECRAWL: List[Tuple[str, str]] = [
    ("None", ""),
    ("Web Results Only", "web"),
    ("News Results Only", "news"),
    ("All Results", "all"),
]

LIVECRAWL_FORMATS: List[Tuple[str, str]] = [
    ("HTML", "html"),
    ("Markdown", "markdown"),
]

SAFESEARCH: List[Tuple[str, str]] = [
    ("Off", "off"),
    ("Moderate", "moderate"),
    ("Strict", "strict"),
]


def _options(pairs: List[Tuple[str, str]]) -> List[Dict[str, str]]:
    return [{"name": name, "value": value} for name, value in pairs]


def _show_for(operation: str) -> Dict[str, Any]:
    return {"show": {"operation": [operation]}}


NODE_DESCRIPTION: Dict[str, Any] = {
    "displayName": "You.com",
    "name": "youDotCom",
    "icon": "file:youdotcom.svg",
    "group": ["transform"],
    "version": 1,
    "usableAsTool": True,
    "subtitle": '={{$parameter["operation"]}}',
    "description": "Search the web and extract content from URLs using You.com APIs",
    "defaults": {"name": "You.com"},
    "inputs": ["main"],
    "outputs": ["main"],
    "credentials": [{"name": "youDotComApi", "required": True}],
    "requestDefaults": {
        "baseURL": DEFAULT_BASE_URL,
        "headers": dict(DEFAULT_HEADERS),
    },
    "properties": [
        {
            "displayName": "Operation",
            "name": "operation",
            "type": "options",
            "noDataExpression": True,
            "options": [
                {
                    "name": "Search",
                    "value": "search",
                    "description": "Search the web and news using You.com",
                    "action": "Search the web and news",
                },
                {
                    "name": "Get Contents",
                    "value": "contents",
                    "description": "Extract content from one or more URLs",
                    "action": "Extract content from web pages",
                },
            ],
            "default": "search",
        },
        # ---- Search ----
        {
            "displayName": "Query",
            "name": "query",
            "type": "string",
            "required": True,
            "displayOptions": _show_for("search"),
            "default": "",
            "placeholder": "e.g., AI news site:github.com filetype:pdf",
            "description": (
                "The search query. Supports operators: site: (domain), filetype: (file type), "
                "+ (require), - (exclude), AND, OR, NOT"
            ),
        },
        {
            "displayName": "Search Options",
            "name": "searchOptions",
            "type": "collection",
            "placeholder": "Add Option",
            "default": {},
            "displayOptions": _show_for("search"),
            "options": [
                {
                    "displayName": "Count",
                    "name": "count",
                    "type": "number",
                    "typeOptions": {"minValue": 1, "maxValue": 100},
                    "default": 10,
                    "description": "Maximum number of search results to return per section (web and news)",
                },
                {
                    "displayName": "Country",
                    "name": "country",
                    "type": "options",
                    "default": "",
                    "description": "Country code that determines the geographical focus of results",
                    "options": _options([("Any", "")] + COUNTRIES),
                },
                {
                    "displayName": "Freshness",
                    "name": "freshness",
                    "type": "options",
                    "default": "",
                    "description": "Filter results by recency",
                    "options": _options(FRESHNESS),
                },
                {
                    "displayName": "Language",
                    "name": "language",
                    "type": "options",
                    "default": "EN",
                    "description": "Language of the web results (BCP 47 format)",
                    "options": _options(LANGUAGES),
                },
                {
                    "displayName": "Livecrawl",
                    "name": "livecrawl",
                    "type": "options",
                    "default": "",
                    "description": "Fetch and return full page content for search results",
                    "options": _options(LIVECRAWL),
                },
                {
                    "displayName": "Livecrawl Format",
                    "name": "livecrawl_formats",
                    "type": "options",
                    "default": "markdown",
                    "description": "Format for livecrawled content",
                    # only meaningful once a livecrawl scope is picked
                    "displayOptions": {"show": {"livecrawl": ["web", "news", "all"]}},
                    "options": _options(LIVECRAWL_FORMATS),
                },
                {
                    "displayName": "Offset",
                    "name": "offset",
                    "type": "number",
                    "typeOptions": {"minValue": 0, "maxValue": 9},
                    "default": 0,
                    "description": (
                        "Pagination offset. Calculated in multiples of count. "
                        "For example, if count=5 and offset=1, results 5-10 are returned."
                    ),
                },
                {
                    "displayName": "Safe Search",
                    "name": "safesearch",
                    "type": "options",
                    "default": "moderate",
                    "description": "Content moderation filter level",
                    "options": _options(SAFESEARCH),
                },
            ],
        },
        # ---- Contents ----
        {
            "displayName": "URLs",
            "name": "urls",
            "type": "string",
            "required": True,
            "displayOptions": _show_for("contents"),
            "default": "",
            "placeholder": "https://example.com, https://example.org",
            "description": "Comma-separated list of URLs to extract content from",
        },
        {
            "displayName": "Contents Options",
            "name": "contentsOptions",
            "type": "collection",
            "placeholder": "Add Option",
            "default": {},
            "displayOptions": _show_for("contents"),
            "options": [
                {
                    "displayName": "Formats",
                    "name": "formats",
                    "type": "multiOptions",
                    "default": ["markdown"],
                    "description": "Output formats to return for each URL",
                    "options": [
                        {"name": "Markdown", "value": "markdown",
                         "description": "Clean text content in Markdown format"},
                        {"name": "HTML", "value": "html",
                         "description": "Full HTML content with layout preserved"},
                        {"name": "Metadata", "value": "metadata",
                         "description": "Structured metadata (JSON-LD, OpenGraph, Twitter Cards)"},
                    ],
                },
                {
                    "displayName": "Crawl Timeout",
                    "name": "crawl_timeout",
                    "type": "number",
                    "typeOptions": {"minValue": 1, "maxValue": 60},
                    "default": 30,
                    "description": "Timeout in seconds for page crawling (1-60)",
                },
            ],
        },
    ],
}


def get_property(name: str) -> Dict[str, Any]:
    """Top-level property by name."""
    for prop in NODE_DESCRIPTION["properties"]:
        if prop["name"] == name:
            return prop
    raise KeyError(name)


def get_option(collection: str, display_name: str) -> Dict[str, Any]:
    """Option inside a collection property, by display name."""
    for option in get_property(collection).get("options", []):
        if option.get("displayName") == display_name:
            return option
    raise KeyError(f"{collection}.{display_name}")
