from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from influx_query.config import API_URL, DATABASE, QUERY, QUERY_PATH, QueryConfig
from influx_query.invoker import invoke
from influx_query.logging_config import LEVELS, configure_logging

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="influx-query",
        description="Run an InfluxQL query against InfluxDB's /query endpoint",
    )
    p.add_argument(
        "--url",
        default=API_URL,
        help="InfluxDB scheme, host and port, e.g. http://localhost:8086 (the /query path is added)",
    )
    p.add_argument("--db", default=DATABASE, help="Database name")
    p.add_argument("-q", "--query", default=QUERY, help="InfluxQL query text")
    p.add_argument(
        "--no-pretty",
        dest="pretty",
        action="store_false",
        help="Do not ask the server for pretty-printed JSON",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: wait indefinitely)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LEVELS,
        help="Logging level (logs go to stderr)",
    )
    return p


def _base_url(url: str) -> str:
    url = url.rstrip("/")
    if url.endswith(QUERY_PATH):
        url = url[: -len(QUERY_PATH)]
    return url


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    configure_logging(args.log_level)

    config = QueryConfig(
        base_url=_base_url(args.url),
        path=QUERY_PATH,
        database=args.db,
        query=args.query,
        pretty=args.pretty,
        timeout=args.timeout,
    )
    try:
        return invoke(config)
    except BrokenPipeError:
        # reader went away (e.g. piped into head); keep the exit-time flush quiet
        logger.debug("stdout closed before the response was written")
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
