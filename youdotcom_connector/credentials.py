"""
You.com API credentials.

One secret, the API key, injected as the ``X-API-Key`` header on every call.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional

from .config import DEFAULT_BASE_URL, Settings
from .exceptions import ConfigurationError
from .request_builder import DEFAULT_HEADERS, SEARCH_PATH, RequestSpec

API_KEY_HEADER = "X-API-Key"

CREDENTIAL_TYPE: Dict[str, Any] = {
    "name": "youDotComApi",
    "displayName": "You.com API",
    "documentationUrl": "https://docs.you.com/get-started/quickstart",
    "properties": [
        {
            "displayName": "API Key",
            "name": "apiKey",
            "type": "string",
            "typeOptions": {"password": True},
            "default": "",
            "required": True,
            "description": "Your You.com API key. Get one at https://you.com/platform/api-keys",
        },
    ],
    "authenticate": {
        "type": "generic",
        "properties": {"headers": {API_KEY_HEADER: "={{$credentials.apiKey}}"}},
    },
    "test": {
        "request": {
            "baseURL": DEFAULT_BASE_URL,
            "url": SEARCH_PATH,
            "method": "GET",
            "qs": {"query": "test", "count": 1},
        },
    },
}


@dataclass(frozen=True)
class YouDotComApiCredentials:
    api_key: str

    name: ClassVar[str] = CREDENTIAL_TYPE["name"]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key='***')"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "YouDotComApiCredentials":
        settings = settings or Settings()
        if not settings.YOUDOTCOM_API_KEY:
            raise ConfigurationError("YOUDOTCOM_API_KEY not configured")
        return cls(api_key=settings.YOUDOTCOM_API_KEY)

    def authenticate(self, headers: Mapping[str, str]) -> Dict[str, str]:
        """Return a copy of ``headers`` carrying the API key."""
        return {**headers, API_KEY_HEADER: self.api_key}


def credential_test_request(base_url: str = DEFAULT_BASE_URL) -> RequestSpec:
    """The cheapest authenticated call: a one-result search."""
    test = CREDENTIAL_TYPE["test"]["request"]
    return RequestSpec(
        method=test["method"],
        url=f"{base_url}{test['url']}",
        headers=dict(DEFAULT_HEADERS),
        params=dict(test["qs"]),
    )
