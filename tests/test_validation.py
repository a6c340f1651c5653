"""Tests for options and response validation."""

import pytest

from youdotcom_connector.exceptions import SchemaValidationError
from youdotcom_connector.validation import (
    ValidationIssue,
    format_issues,
    validate_contents_options,
    validate_contents_response,
    validate_search_options,
    validate_search_response,
)


def _issues(fn, raw):
    with pytest.raises(SchemaValidationError) as exc_info:
        fn(raw)
    return exc_info.value.issues


class TestSearchOptions:

    def test_empty_options_valid(self):
        options = validate_search_options({})
        assert options.model_dump(exclude_none=True) == {}

    def test_reports_every_violation_in_one_pass(self):
        issues = _issues(validate_search_options, {"count": 0, "freshness": "century"})

        assert [i.dotted_path for i in issues] == ["count", "freshness"]
        assert [i.code for i in issues] == ["too_small", "invalid_enum_value"]

    @pytest.mark.parametrize("field,value", [
        ("count", 1), ("count", 100), ("offset", 0), ("offset", 9),
    ])
    def test_range_bounds_inclusive(self, field, value):
        options = validate_search_options({field: value})
        assert getattr(options, field) == value

    @pytest.mark.parametrize("field,value,code", [
        ("count", 0, "too_small"),
        ("count", 101, "too_big"),
        ("offset", -1, "too_small"),
        ("offset", 10, "too_big"),
    ])
    def test_out_of_range(self, field, value, code):
        issues = _issues(validate_search_options, {field: value})
        assert len(issues) == 1
        assert issues[0].path == (field,)
        assert issues[0].code == code

    @pytest.mark.parametrize("value", ["5", 5.0, True])
    def test_no_coercion_to_int(self, value):
        issues = _issues(validate_search_options, {"count": value})
        assert issues[0].code == "invalid_type"

    def test_enum_is_case_sensitive(self):
        issues = _issues(validate_search_options, {"safesearch": "Strict"})
        assert issues[0].code == "invalid_enum_value"

    def test_country_must_be_string(self):
        issues = _issues(validate_search_options, {"country": 840})
        assert issues[0].path == ("country",)
        assert issues[0].code == "invalid_type"

    def test_unknown_keys_ignored(self):
        options = validate_search_options({"count": 3, "color": "blue"})
        assert options.model_dump(exclude_none=True) == {"count": 3}

    def test_non_mapping_fails_at_root(self):
        issues = _issues(validate_search_options, ["count"])
        assert issues[0].dotted_path == ""


class TestContentsOptions:

    def test_formats_keep_order_and_drop_duplicates(self):
        options = validate_contents_options({"formats": ["html", "markdown", "html"]})
        assert options.formats == ["html", "markdown"]

    def test_bad_format_reports_index(self):
        issues = _issues(validate_contents_options, {"formats": ["markdown", "pdf"]})
        assert issues[0].dotted_path == "formats.1"
        assert issues[0].code == "invalid_enum_value"

    @pytest.mark.parametrize("value,code", [(0, "too_small"), (61, "too_big")])
    def test_crawl_timeout_range(self, value, code):
        issues = _issues(validate_contents_options, {"crawl_timeout": value})
        assert issues[0].code == code

    def test_crawl_timeout_bounds(self):
        assert validate_contents_options({"crawl_timeout": 1}).crawl_timeout == 1
        assert validate_contents_options({"crawl_timeout": 60}).crawl_timeout == 60


class TestSearchResponse:

    def test_minimal_payload_with_extra_field_passes_through(self):
        payload = {"results": {}, "request_id": "r-1"}
        validated = validate_search_response(payload)
        assert validated == {"results": {}, "request_id": "r-1"}

    def test_nested_extras_preserved(self, search_payload):
        validated = validate_search_response(search_payload)

        assert validated["results"]["web"][0]["favicon_url"] == "https://example.com/favicon.ico"
        assert validated["metadata"]["latency"] == 0.42

    def test_absent_optional_fields_stay_absent(self):
        validated = validate_search_response({"results": {"web": []}})
        assert "metadata" not in validated
        assert "news" not in validated["results"]

    def test_missing_results(self):
        issues = _issues(validate_search_response, {"metadata": {}})
        assert issues[0].path == ("results",)
        assert issues[0].code == "invalid_type"

    def test_web_result_missing_fields(self):
        payload = {"results": {"web": [{"url": "https://a.com"}]}}
        issues = _issues(validate_search_response, payload)

        assert [i.dotted_path for i in issues] == ["results.web.0.title", "results.web.0.description"]

    def test_error_source_is_response(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_search_response({})
        assert exc_info.value.source == "response"


class TestContentsResponse:

    def test_valid_list_with_extras(self):
        payload = [
            {"url": "https://a.com", "markdown": "# A", "metadata": {"og:title": "A", "n": 1}, "status": 200},
        ]
        assert validate_contents_response(payload) == payload

    def test_invalid_url(self):
        issues = _issues(validate_contents_response, [{"url": "not a url"}])
        assert issues[0].dotted_path == "0.url"
        assert issues[0].code == "invalid_string"

    def test_not_a_list(self):
        issues = _issues(validate_contents_response, {"url": "https://a.com"})
        assert issues[0].dotted_path == ""

    def test_metadata_must_be_mapping(self):
        issues = _issues(validate_contents_response, [{"url": "https://a.com", "metadata": "x"}])
        assert issues[0].dotted_path == "0.metadata"


class TestFormatting:

    def test_numbered_lines_with_root(self):
        issues = [
            ValidationIssue(("count",), "Input should be greater than or equal to 1", "too_small"),
            ValidationIssue((), "Input should be a valid list", "invalid_type"),
        ]
        assert format_issues(issues) == (
            "Validation error:\n"
            "  1. count: Input should be greater than or equal to 1\n"
            "  2. root: Input should be a valid list"
        )

    def test_exception_message_and_serialization(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_search_options({"count": 0, "freshness": "century"})
        err = exc_info.value

        assert str(err).startswith("Validation error:\n  1. count: ")
        assert "\n  2. freshness: " in str(err)
        assert err.serialized_issues()[0] == {
            "path": "count",
            "message": err.issues[0].message,
            "code": "too_small",
        }
