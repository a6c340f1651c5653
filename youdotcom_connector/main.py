import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import structlog

from youdotcom_connector.config.settings import Settings
from youdotcom_connector.context import ExecutionItem, WorkflowContext
from youdotcom_connector.exceptions import ConfigurationError, NodeApiError
from youdotcom_connector.node import YouDotComNode
from youdotcom_connector.transport import YouDotComClient


def _init_logging(level: str):
    logging.basicConfig(level=level, stream=sys.stderr)
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="youdotcom", description="You.com Search and Contents")
    p.add_argument("--continue-on-fail", action="store_true", default=None,
                   help="Record failures instead of aborting (defaults to CONTINUE_ON_FAIL)")
    sub = p.add_subparsers(dest="operation", required=True)

    s = sub.add_parser("search", help="Search the web and news")
    s.add_argument("query", help="Search query; operators such as site: are passed through")
    s.add_argument("--count", type=int)
    s.add_argument("--country")
    s.add_argument("--freshness")
    s.add_argument("--language")
    s.add_argument("--livecrawl")
    s.add_argument("--livecrawl-formats", dest="livecrawl_formats")
    s.add_argument("--offset", type=int)
    s.add_argument("--safesearch")

    c = sub.add_parser("contents", help="Extract content from web pages")
    c.add_argument("urls", help="Comma-separated URLs")
    c.add_argument("--formats", help="Comma-separated formats (markdown,html,metadata)")
    c.add_argument("--crawl-timeout", dest="crawl_timeout", type=int)
    return p


def parameters_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Map CLI arguments onto the node's parameter names; unset flags stay absent."""
    if args.operation == "search":
        keys = ("count", "country", "freshness", "language", "livecrawl",
                "livecrawl_formats", "offset", "safesearch")
        options = {k: getattr(args, k) for k in keys if getattr(args, k) is not None}
        return {"operation": "search", "query": args.query, "searchOptions": options}

    options: Dict[str, Any] = {}
    if args.formats:
        options["formats"] = [f.strip() for f in args.formats.split(",") if f.strip()]
    if args.crawl_timeout is not None:
        options["crawl_timeout"] = args.crawl_timeout
    return {"operation": "contents", "urls": args.urls, "contentsOptions": options}


async def arun(settings: Settings, parameters: Dict[str, Any], continue_on_fail: bool) -> List[Dict[str, Any]]:
    node = YouDotComNode(settings)
    async with YouDotComClient.from_settings(settings) as client:
        context = WorkflowContext([ExecutionItem(parameters=parameters)], client,
                                  continue_on_fail=continue_on_fail)
        outputs = await node.execute(context)
    return [o.to_dict() for o in outputs]


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    _init_logging(settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)

    continue_on_fail = settings.CONTINUE_ON_FAIL if args.continue_on_fail is None else args.continue_on_fail
    try:
        outputs = asyncio.run(arun(settings, parameters_from_args(args), continue_on_fail))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except NodeApiError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1

    print(json.dumps(outputs, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
