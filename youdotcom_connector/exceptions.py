"""
Custom exceptions for the You.com connector
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .validation import ValidationIssue


class ConnectorError(Exception):
    """Base exception for the connector"""
    pass


class ConfigurationError(ConnectorError):
    """Configuration related errors (unknown operation, missing credentials)"""
    pass


class SchemaValidationError(ConnectorError):
    """Options or API payload did not match the declared schema"""
    def __init__(self, issues: List["ValidationIssue"], source: str = "options"):
        from .validation import format_issues
        super().__init__(format_issues(issues))
        self.issues = issues
        self.source = source

    def serialized_issues(self) -> List[Dict[str, Any]]:
        return [issue.to_dict() for issue in self.issues]


class OperationInputError(ConnectorError):
    """Derived operation input is unusable (e.g. no URLs after cleanup)"""
    pass


class APIError(ConnectorError):
    """API related errors"""
    def __init__(self, message: str, provider: str = "youdotcom", status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class NodeApiError(ConnectorError):
    """A failing item aborted the batch"""
    def __init__(self, message: str, item_index: int, issues: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.item_index = item_index
        self.issues = issues or []

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": str(self), "item_index": self.item_index}
        if self.issues:
            data["issues"] = self.issues
        return data
