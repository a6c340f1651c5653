"""
Schema validation for options and API responses.

Every check runs in a single pass so callers get the full list of
violations, never just the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple
import logging

from pydantic import ValidationError

from .exceptions import SchemaValidationError
from .schemas import (
    ContentsOptions,
    ContentsResponse,
    SearchOptions,
    SearchResponse,
)

logger = logging.getLogger(__name__)

# pydantic error types -> violation codes surfaced to the host
_CODE_MAP = {
    "greater_than": "too_small",
    "greater_than_equal": "too_small",
    "less_than": "too_big",
    "less_than_equal": "too_big",
    "literal_error": "invalid_enum_value",
    "enum": "invalid_enum_value",
    "invalid_url": "invalid_string",
    "missing": "invalid_type",
}


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-level violation."""
    path: Tuple[str, ...]
    message: str
    code: str

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.dotted_path, "message": self.message, "code": self.code}


def _issue_code(error_type: str) -> str:
    if error_type in _CODE_MAP:
        return _CODE_MAP[error_type]
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return "invalid_type"
    return error_type


def issues_from_error(exc: ValidationError) -> List[ValidationIssue]:
    """Flatten a pydantic ValidationError into ordered issues."""
    return [
        ValidationIssue(
            path=tuple(str(part) for part in err["loc"]),
            message=err["msg"],
            code=_issue_code(err["type"]),
        )
        for err in exc.errors(include_url=False)
    ]


def format_issues(issues: Iterable[ValidationIssue]) -> str:
    """Render issues as the numbered, one-line-per-violation message."""
    lines = [
        f"  {n}. {issue.dotted_path or 'root'}: {issue.message}"
        for n, issue in enumerate(issues, start=1)
    ]
    return "Validation error:\n" + "\n".join(lines)


def validate_search_options(raw: Any) -> SearchOptions:
    try:
        return SearchOptions.model_validate(raw)
    except ValidationError as e:
        raise SchemaValidationError(issues_from_error(e), source="options") from e


def validate_contents_options(raw: Any) -> ContentsOptions:
    try:
        return ContentsOptions.model_validate(raw)
    except ValidationError as e:
        raise SchemaValidationError(issues_from_error(e), source="options") from e


def validate_search_response(raw: Any) -> Dict[str, Any]:
    """Validate a search payload and return it with every upstream field intact.

    Strict validation never rewrites values, so the accepted payload is the
    validated value: known fields checked, extra fields passed through.
    """
    try:
        SearchResponse.model_validate(raw)
    except ValidationError as e:
        logger.warning("Search response failed validation with %d issue(s)", e.error_count())
        raise SchemaValidationError(issues_from_error(e), source="response") from e
    return raw


def validate_contents_response(raw: Any) -> List[Dict[str, Any]]:
    """Validate a contents payload (a list of extraction results)."""
    try:
        ContentsResponse.validate_python(raw)
    except ValidationError as e:
        logger.warning("Contents response failed validation with %d issue(s)", e.error_count())
        raise SchemaValidationError(issues_from_error(e), source="response") from e
    return raw
