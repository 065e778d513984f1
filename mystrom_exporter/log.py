"""Logging configuration helpers."""

from __future__ import annotations

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    The aiohttp access log is only shown when running at debug level.
    """
    for handler in list(logging.getLogger().handlers):
        logging.getLogger().removeHandler(handler)

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if numeric_level > logging.DEBUG:
        logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
