"""Tests for the node's declarative parameter schema."""

import pytest

from youdotcom_connector.description import NODE_DESCRIPTION, get_option, get_property
from youdotcom_connector.node import YouDotComNode


def _values(prop):
    return [o["value"] for o in prop["options"]]


class TestNodeDescription:

    def test_identity(self):
        assert NODE_DESCRIPTION["displayName"] == "You.com"
        assert NODE_DESCRIPTION["name"] == "youDotCom"
        assert NODE_DESCRIPTION["version"] == 1
        assert YouDotComNode.description is NODE_DESCRIPTION

    def test_requires_credentials(self):
        assert NODE_DESCRIPTION["credentials"] == [{"name": "youDotComApi", "required": True}]

    def test_request_defaults(self):
        defaults = NODE_DESCRIPTION["requestDefaults"]
        assert defaults["baseURL"] == "https://ydc-index.io"
        assert defaults["headers"]["User-Agent"].startswith("n8n-nodes-youdotcom/")

    def test_exactly_two_operations(self):
        operation = get_property("operation")
        assert _values(operation) == ["search", "contents"]
        assert operation["default"] == "search"


class TestSearchParameters:

    def test_query_required_and_search_only(self):
        query = get_property("query")
        assert query["required"] is True
        assert query["displayOptions"]["show"]["operation"] == ["search"]

    def test_count_and_offset_ranges(self):
        assert get_option("searchOptions", "Count")["typeOptions"] == {"minValue": 1, "maxValue": 100}
        assert get_option("searchOptions", "Offset")["typeOptions"] == {"minValue": 0, "maxValue": 9}

    @pytest.mark.parametrize("code", ["US", "GB", "DE", "FR", "JP"])
    def test_country_catalog(self, code):
        assert code in _values(get_option("searchOptions", "Country"))

    def test_country_any_first(self):
        assert _values(get_option("searchOptions", "Country"))[0] == ""

    @pytest.mark.parametrize("code", ["EN", "DE", "FR", "JP", "ZH-HANS", "PT-BR"])
    def test_language_catalog(self, code):
        assert code in _values(get_option("searchOptions", "Language"))

    def test_enum_catalogs_match_schema(self):
        assert set(_values(get_option("searchOptions", "Freshness"))) == {"", "day", "week", "month", "year"}
        assert set(_values(get_option("searchOptions", "Livecrawl"))) == {"", "web", "news", "all"}
        assert set(_values(get_option("searchOptions", "Safe Search"))) == {"off", "moderate", "strict"}

    def test_livecrawl_format_shown_only_with_scope(self):
        option = get_option("searchOptions", "Livecrawl Format")
        assert option["displayOptions"]["show"]["livecrawl"] == ["web", "news", "all"]
        assert set(_values(option)) == {"html", "markdown"}


class TestContentsParameters:

    def test_urls_required_and_contents_only(self):
        urls = get_property("urls")
        assert urls["required"] is True
        assert urls["displayOptions"]["show"]["operation"] == ["contents"]

    def test_formats_multi_options(self):
        formats = get_option("contentsOptions", "Formats")
        assert formats["type"] == "multiOptions"
        assert _values(formats) == ["markdown", "html", "metadata"]

    def test_crawl_timeout_range(self):
        option = get_option("contentsOptions", "Crawl Timeout")
        assert option["typeOptions"] == {"minValue": 1, "maxValue": 60}

    def test_unknown_lookup_raises(self):
        with pytest.raises(KeyError):
            get_option("contentsOptions", "Depth")
