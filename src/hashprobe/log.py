"""Logging setup shared by the hashprobe modules."""

import logging
import os
from typing import Optional

from .config import LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "hashprobe"

_LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``hashprobe`` logger hierarchy.

    The handler writes to stderr so the report on stdout stays clean. The
    level comes from ``level`` or the HASHPROBE_LOG_LEVEL environment
    variable, defaulting to WARNING.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``hashprobe`` logger."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_event(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
