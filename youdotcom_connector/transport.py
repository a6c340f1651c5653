"""Async HTTP transport for the You.com API.

Sends a RequestSpec with the credential header injected and returns the
decoded JSON body. One request per call; no retries.
"""

from __future__ import annotations
from typing import Any, Optional
import logging

import httpx

from .config import DEFAULT_BASE_URL, Settings
from .credentials import YouDotComApiCredentials, credential_test_request
from .exceptions import APIError
from .request_builder import RequestSpec
from .utils.log_redaction import redact_headers, safe_log_params

logger = logging.getLogger(__name__)


def _status_message(response: httpx.Response) -> str:
    detail = ""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = str(body.get("detail") or body.get("message") or body.get("error") or "")
    elif response.text:
        detail = response.text[:200]
    message = f"You.com API returned HTTP {response.status_code}"
    return f"{message}: {detail}" if detail else message


class YouDotComClient:
    """Thin async client; one instance per batch."""

    def __init__(self, credentials: YouDotComApiCredentials, timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 base_url: str = DEFAULT_BASE_URL):
        self.credentials = credentials
        self.base_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None,
                      transport: Optional[httpx.AsyncBaseTransport] = None) -> "YouDotComClient":
        settings = settings or Settings()
        return cls(
            YouDotComApiCredentials.from_settings(settings),
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            transport=transport,
            base_url=settings.YOUDOTCOM_BASE_URL,
        )

    async def __aenter__(self) -> "YouDotComClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, request: RequestSpec) -> Any:
        """Perform the request and return its JSON body.

        Raises:
            APIError: on network failure, non-2xx status or a non-JSON body
        """
        headers = self.credentials.authenticate(request.headers)
        logger.debug(
            "%s %s headers=%s params=%s",
            request.method, request.url, redact_headers(headers), safe_log_params(request.params),
        )
        try:
            response = await self._client.request(
                request.method,
                request.url,
                params=request.params,
                json=request.json,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise APIError(_status_message(e.response), status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            raise APIError(f"Request to {request.url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise APIError("You.com API returned a non-JSON body", status_code=response.status_code) from e

    async def verify_credentials(self) -> bool:
        """Run the credential test request; True when the key is accepted."""
        try:
            await self.send(credential_test_request(self.base_url))
        except APIError as e:
            logger.warning("You.com credential test failed: %s", e)
            return False
        return True
