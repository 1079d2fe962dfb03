from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional

import requests

from influx_query.config import QueryConfig

logger = logging.getLogger(__name__)


def build_request(config: QueryConfig) -> requests.PreparedRequest:
    return requests.Request("GET", config.url, params=config.params()).prepare()


def invoke(
    config: Optional[QueryConfig] = None,
    session: Optional[requests.Session] = None,
    out: Optional[BinaryIO] = None,
) -> int:
    """Send the query once and copy the raw response body to ``out``.

    Returns 0 whenever a response arrives, even an HTTP error, and 1 when
    the request could not be made at all.
    """
    config = config or QueryConfig()
    out = out if out is not None else sys.stdout.buffer
    request = build_request(config)
    logger.debug("GET %s", request.url)

    try:
        if session is not None:
            response = session.send(request, timeout=config.timeout)
        else:
            with requests.Session() as own_session:
                response = own_session.send(request, timeout=config.timeout)
    except requests.RequestException as e:
        logger.error("Query to %s failed: %s", config.url, e)
        return 1

    logger.info("HTTP %s from %s", response.status_code, config.url)
    if response.status_code >= 400:
        logger.warning("Server answered %s %s", response.status_code, response.reason)

    out.write(response.content)
    out.flush()
    return 0
