"""
You.com node - Search and Contents operations.

Runs a batch of items through options validation, request building, the
authenticated HTTP call and response validation. Failures are isolated per
item; the context's continue-on-fail flag decides whether a failing item is
recorded in its output slot or aborts the batch.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import asyncio
import logging

from .config import Settings
from .context import OutputItem, WorkflowContext
from .description import NODE_DESCRIPTION
from .exceptions import (
    APIError,
    ConfigurationError,
    NodeApiError,
    OperationInputError,
    SchemaValidationError,
)
from .monitoring_metrics import API_ERRORS, API_LATENCY, API_REQUESTS
from .request_builder import build_contents_request, build_search_request
from .validation import (
    validate_contents_options,
    validate_contents_response,
    validate_search_options,
    validate_search_response,
)

logger = logging.getLogger(__name__)

OPERATIONS = ("search", "contents")


class ErrorKind(str, Enum):
    """Why an item failed"""
    CONFIGURATION = "configuration"
    OPTIONS_VALIDATION = "options_validation"
    OPERATION_INPUT = "operation_input"
    TRANSPORT = "transport"
    RESPONSE_VALIDATION = "response_validation"


@dataclass(frozen=True)
class ItemOutcome:
    """Result of one item: payloads on success, a tagged failure otherwise."""
    index: int
    operation: str
    payloads: List[Dict[str, Any]] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    issues: List[Dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def error_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"error": self.message}
        if self.issues:
            record["validationErrors"] = self.issues
        return record


def _read_options(context: WorkflowContext, name: str, index: int) -> Any:
    """Read an options collection; empty strings are the form's "Any" choice."""
    raw = context.get_node_parameter(name, index, {})
    if isinstance(raw, dict):
        return {k: v for k, v in raw.items() if v != ""}
    return raw


class YouDotComNode:
    """Search the web and extract content from URLs using You.com APIs"""

    description: Dict[str, Any] = NODE_DESCRIPTION

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    async def execute(self, context: WorkflowContext) -> List[OutputItem]:
        items = context.get_input_data()
        returned: List[OutputItem] = []

        if self.settings.MAX_CONCURRENCY <= 1:
            for index in range(len(items)):
                outcome = await self.process_item(context, index)
                returned.extend(self._collect(context, outcome))
            return returned

        sem = asyncio.Semaphore(self.settings.MAX_CONCURRENCY)

        async def bounded(index: int) -> ItemOutcome:
            async with sem:
                return await self.process_item(context, index)

        outcomes = await asyncio.gather(*(bounded(i) for i in range(len(items))))
        for outcome in outcomes:
            returned.extend(self._collect(context, outcome))
        return returned

    def _collect(self, context: WorkflowContext, outcome: ItemOutcome) -> List[OutputItem]:
        if outcome.ok:
            return [OutputItem(json=payload, paired_item=outcome.index) for payload in outcome.payloads]

        API_ERRORS.labels(operation=outcome.operation, kind=outcome.error_kind.value).inc()
        if context.continue_on_fail():
            logger.warning("Item %d failed (%s), continuing: %s",
                           outcome.index, outcome.error_kind.value, outcome.message)
            return [OutputItem(json=outcome.error_record(), paired_item=outcome.index)]

        logger.error("Item %d failed (%s), aborting batch", outcome.index, outcome.error_kind.value)
        raise NodeApiError(outcome.message, item_index=outcome.index, issues=outcome.issues)

    async def process_item(self, context: WorkflowContext, index: int) -> ItemOutcome:
        """Run one item and classify any failure."""
        operation = "unknown"
        try:
            operation = context.get_node_parameter("operation", index, "search")
            if operation == "search":
                payloads = [await self._execute_search(context, index)]
            elif operation == "contents":
                payloads = await self._execute_contents(context, index)
            else:
                bad = operation
                operation = "unknown"
                raise ConfigurationError(f"The operation \"{bad}\" is not supported")
        except SchemaValidationError as e:
            kind = ErrorKind.OPTIONS_VALIDATION if e.source == "options" else ErrorKind.RESPONSE_VALIDATION
            return ItemOutcome(index, operation, error_kind=kind, message=str(e),
                               issues=e.serialized_issues())
        except OperationInputError as e:
            return ItemOutcome(index, operation, error_kind=ErrorKind.OPERATION_INPUT, message=str(e))
        except APIError as e:
            return ItemOutcome(index, operation, error_kind=ErrorKind.TRANSPORT, message=str(e))
        except ConfigurationError as e:
            return ItemOutcome(index, operation, error_kind=ErrorKind.CONFIGURATION, message=str(e))
        except Exception as e:
            # host adapter and httpx encoding failures surface here
            logger.exception("Item %d: unexpected failure in %s", index, operation)
            return ItemOutcome(index, operation, error_kind=ErrorKind.TRANSPORT, message=str(e))

        logger.info("Item %d: %s returned %d result(s)", index, operation, len(payloads))
        return ItemOutcome(index, operation, payloads=payloads)

    async def _send(self, context: WorkflowContext, operation: str, request) -> Any:
        API_REQUESTS.labels(operation=operation).inc()
        with API_LATENCY.labels(operation=operation).time():
            return await context.http_request_with_authentication(request)

    async def _execute_search(self, context: WorkflowContext, index: int) -> Dict[str, Any]:
        query = context.get_node_parameter("query", index)
        options = validate_search_options(_read_options(context, "searchOptions", index))

        request = build_search_request(query, options, base_url=self.settings.YOUDOTCOM_BASE_URL)
        raw = await self._send(context, "search", request)
        return validate_search_response(raw)

    async def _execute_contents(self, context: WorkflowContext, index: int) -> List[Dict[str, Any]]:
        urls = context.get_node_parameter("urls", index)
        options = validate_contents_options(_read_options(context, "contentsOptions", index))

        request = build_contents_request(urls, options, base_url=self.settings.YOUDOTCOM_BASE_URL)
        raw = await self._send(context, "contents", request)
        return validate_contents_response(raw)
