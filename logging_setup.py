"""Centralized logging configuration for SalesTracker.

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the
  application root logger (``"sales_tracker"``). Called once by the GUI entry
  point at startup.
- ``get_logger(name)``: acquire a child logger of the application root,
  attaching a ``NullHandler`` when nothing has been configured yet.

Modules never attach their own handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_ROOT_LOGGER_NAME = "sales_tracker"
_CONFIGURED = False


def _parse_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv("SALES_TRACKER_LOG_LEVEL")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    # unknown names fall back to INFO
    return logging.INFO


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the application root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level name. If ``None``, the
        ``SALES_TRACKER_LOG_LEVEL`` environment variable is used when set,
        otherwise ``logging.INFO``.
    fmt:
        Optional format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        Output stream for the handler (defaults to ``sys.stderr``).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_ROOT_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setLevel(_parse_level(level))
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return ``sales_tracker.<name>``, silent until logging is configured."""

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
