from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.upper() in LEVELS:
        return getattr(logging, level.upper())
    raise ValueError(f"Invalid log level: {level}")


def configure_logging(
    level: Union[str, int] = "WARNING",
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Route root logging to stderr; stdout is reserved for the response body."""
    resolved_level = _coerce_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    return handler
