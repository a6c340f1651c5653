"""Execution context: the host-facing side of a node run.

A workflow host adapts its own execution API to this class; the CLI and the
tests use it directly with an in-memory item list.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import ConfigurationError
from .request_builder import RequestSpec
from .transport import YouDotComClient

_MISSING = object()


@dataclass
class ExecutionItem:
    """One unit of work: its own parameter values plus any upstream JSON."""
    parameters: Dict[str, Any] = field(default_factory=dict)
    json: Dict[str, Any] = field(default_factory=dict)


@dataclass
class OutputItem:
    json: Dict[str, Any]
    paired_item: int

    def to_dict(self) -> Dict[str, Any]:
        return {"json": self.json, "pairedItem": {"item": self.paired_item}}


class WorkflowContext:
    """In-memory execution context.

    Parameters resolve per item first, then from node-level parameters.
    """

    def __init__(self, items: Sequence[ExecutionItem], client: YouDotComClient,
                 continue_on_fail: bool = False,
                 node_parameters: Optional[Dict[str, Any]] = None):
        self._items = list(items)
        self._client = client
        self._continue_on_fail = continue_on_fail
        self._node_parameters = dict(node_parameters or {})

    def get_input_data(self) -> List[ExecutionItem]:
        return self._items

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        item = self._items[item_index]
        if name in item.parameters:
            return item.parameters[name]
        if name in self._node_parameters:
            return self._node_parameters[name]
        if default is _MISSING:
            raise ConfigurationError(f"Could not get parameter '{name}' for item {item_index}")
        return default

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    async def http_request_with_authentication(self, request: RequestSpec) -> Any:
        return await self._client.send(request)
