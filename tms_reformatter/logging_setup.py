"""Centralized logging configuration for the ``tms_reformatter`` package.

``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
root logger and is meant to be called once by the entrypoint (``app.py``).
Library modules only call ``get_logger(__name__)``.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "tms_reformatter"
_CONFIGURED = False


def _level_from(value: Optional[Union[int, str]]) -> Optional[int]:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip().upper()
        if value.isdigit():
            return int(value)
        numeric = getattr(logging, value, None)
        if isinstance(numeric, int):
            return numeric
    return None


def _parse_level(level: Optional[Union[int, str]]) -> int:
    resolved = _level_from(level)
    if resolved is None:
        resolved = _level_from(os.getenv("TMS_REFORMATTER_LOG_LEVEL"))
    return logging.INFO if resolved is None else resolved


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    ``level`` falls back to ``TMS_REFORMATTER_LOG_LEVEL`` and then INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
