"""Logging configuration helpers for the link preview service."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _normalise_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        mapped = logging.getLevelName(value)
        if isinstance(mapped, int):
            return mapped
    return logging.INFO


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    """Configure root logging to stream to the console.

    Existing root handlers are replaced so repeated calls (e.g. uvicorn's
    reloader importing the app twice) do not duplicate every line.  Returns
    the effective numeric level.
    """
    log_level = _normalise_level(level)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    # httpx logs every request at INFO; the fetcher already does that.
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
    return log_level
