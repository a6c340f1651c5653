"""
You.com connector - Search and Contents operations for workflow hosts
"""

__version__ = "0.2.5"

__all__ = [
    "YouDotComNode",
    "WorkflowContext",
    "ExecutionItem",
    "Settings",
    "__version__",
]

def __getattr__(name: str):
    """Lazy import to avoid import-time side effects."""
    if name == "YouDotComNode":
        from .node import YouDotComNode
        return YouDotComNode
    elif name == "WorkflowContext":
        from .context import WorkflowContext
        return WorkflowContext
    elif name == "ExecutionItem":
        from .context import ExecutionItem
        return ExecutionItem
    elif name == "Settings":
        from .config.settings import Settings
        return Settings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
