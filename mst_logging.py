"""Logging utilities for the MST tools.

Library modules only create loggers; handlers are attached once by the
command-line entry point through `configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Optional

ROOT_LOGGER_NAME = "mst_compare"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_DEFAULT_LEVEL = logging.WARNING

_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the `mst_compare` namespace.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package root logger.

    Example:
        >>> from mst_logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.warning("graph may be disconnected")
    """
    if name is None or name == ROOT_LOGGER_NAME:
        logger_name = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{ROOT_LOGGER_NAME}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if logger.level == logging.NOTSET:
        logger.setLevel(_DEFAULT_LEVEL)

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every MST logger created so far and of future ones."""
    global _DEFAULT_LEVEL
    level = _resolve_level(level)

    get_logger().setLevel(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """Attach a single stream handler to the package root logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses `DEFAULT_FORMAT`.
        stream: Output stream (default: sys.stderr).
    """
    level = _resolve_level(level)
    if stream is None:
        stream = sys.stderr
    if format_string is None:
        format_string = DEFAULT_FORMAT

    root = get_logger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    root.addHandler(handler)

    set_log_level(level)
    return root
