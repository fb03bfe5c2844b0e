"""Logging utilities for the currapi package."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# httpx/httpcore log every request at INFO; only our verbose mode may speak at INFO.
TRANSPORT_LOGGERS = ("httpx", "httpcore")

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "currapi") -> logging.Logger:
    """Return a logger, installing the package's basic format on first use."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        for transport in TRANSPORT_LOGGERS:
            logging.getLogger(transport).setLevel(logging.WARNING)
        _LOGGER = logging.getLogger("currapi")
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "TRANSPORT_LOGGERS", "get_logger"]
