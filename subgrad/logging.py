"""Logging utilities for subgrad.

Provides per-module loggers under the ``subgrad`` namespace so optimizer runs
can narrate their progress without printing to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack duplicate handlers. The
    name should typically be ``__name__`` of the calling module.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger ``subgrad``.

    Returns:
        Configured logger instance.

    Example:
        >>> from subgrad.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Starting subgradient run")
    """
    if name is None:
        name = "subgrad"

    if name == "subgrad" or name.startswith("subgrad."):
        logger_name = name
    else:
        logger_name = f"subgrad.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for subgrad.

    Replaces the handlers of every cached logger with a single stream handler
    and updates the defaults used for loggers created afterwards. Typically
    called once by the application that drives the optimizer.

    Args:
        level: Logging level or its name such as 'INFO' (default: WARNING).
        format_string: Custom format string. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


__all__ = ["get_logger", "configure_logging"]
