"""Logging redaction utilities to prevent leaking the API key."""

from typing import Any, Dict, Mapping, Optional

REDACTED = "***REDACTED***"

SENSITIVE_HEADERS = {
    "authorization", "x-api-key", "api-key", "apikey", "cookie", "set-cookie",
}


def redact_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Redact credential headers."""
    if not headers:
        return {}
    return {
        k: REDACTED if k.lower() in SENSITIVE_HEADERS else v
        for k, v in headers.items()
    }


def safe_log_params(params: Any) -> Any:
    """Redact credential-looking keys from log parameters."""
    if isinstance(params, Mapping):
        return {
            k: REDACTED if str(k).lower() in SENSITIVE_HEADERS else safe_log_params(v)
            for k, v in params.items()
        }
    if isinstance(params, (list, tuple)):
        return [safe_log_params(item) for item in params]
    return params
