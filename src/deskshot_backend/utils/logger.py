"""
Logging utilities for DeskShot.
All module loggers hang off one package logger that writes to stdout,
so the operator sees the capture sequence step by step in one stream.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "deskshot_backend"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.environ.get("DESKSHOT_LOG_LEVEL", "INFO")
    return getattr(logging, name.upper(), logging.INFO)


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        # Only configure once per process
        root.setLevel(_resolve_level(None))
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
    return root


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.
    
    Args:
        name: Logger name (typically __name__). Names outside the
              deskshot_backend package are nested under it.
        level: Log level for this logger only (DEBUG, INFO, WARNING, ERROR).
               The package default comes from DESKSHOT_LOG_LEVEL or INFO.
               
    Returns:
        Configured logging.Logger instance.
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_resolve_level(level))
    return logger


def set_level(level: str) -> None:
    """Change the level for every DeskShot logger at once."""
    _package_logger().setLevel(_resolve_level(level))
