"""Shared fixtures: a fake You.com API behind httpx.MockTransport."""

import copy
import json

import httpx
import pytest

from youdotcom_connector.config import Settings
from youdotcom_connector.context import ExecutionItem, WorkflowContext
from youdotcom_connector.credentials import YouDotComApiCredentials
from youdotcom_connector.transport import YouDotComClient

API_KEY = "ydc-test-key"

SEARCH_PAYLOAD = {
    "results": {
        "web": [
            {
                "url": "https://example.com/a",
                "title": "Example A",
                "description": "First result",
                "snippets": ["snippet one"],
                "favicon_url": "https://example.com/favicon.ico",
            }
        ],
        "news": [
            {
                "url": "https://news.example.com/b",
                "title": "Example B",
                "description": "A news story",
                "page_age": "2025-01-01T00:00:00",
            }
        ],
    },
    "metadata": {"search_uuid": "abc-123", "query": "example", "latency": 0.42},
}


class FakeYouDotCom:
    """Records every request; answers search and contents calls.

    Queue explicit responses with ``respond_with`` to override the defaults.
    """

    def __init__(self):
        self.requests = []
        self._queued = []

    def respond_with(self, status_code=200, json_body=None, content=None):
        self._queued.append((status_code, json_body, content))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._queued:
            status_code, json_body, content = self._queued.pop(0)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        if request.url.path == "/v1/search":
            return httpx.Response(200, json=SEARCH_PAYLOAD)
        if request.url.path == "/v1/contents":
            body = json.loads(request.content)
            return httpx.Response(
                200,
                json=[{"url": u, "markdown": f"# {u}"} for u in body["urls"]],
            )
        return httpx.Response(404, json={"detail": "Not Found"})


@pytest.fixture
def search_payload():
    return copy.deepcopy(SEARCH_PAYLOAD)


@pytest.fixture
def api():
    return FakeYouDotCom()


@pytest.fixture
def client(api):
    return YouDotComClient(YouDotComApiCredentials(API_KEY), transport=httpx.MockTransport(api))


@pytest.fixture
def settings():
    return Settings(YOUDOTCOM_API_KEY=API_KEY, MAX_CONCURRENCY=1)


@pytest.fixture
def make_context(client):
    def _make(parameter_sets, continue_on_fail=False):
        items = [ExecutionItem(parameters=p) for p in parameter_sets]
        return WorkflowContext(items, client, continue_on_fail=continue_on_fail)
    return _make
