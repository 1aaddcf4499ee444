"""Logging utilities for qsparse.

Every module logs through a cached logger in the ``qsparse`` namespace.
Loggers write to stderr and do not propagate to the root logger, so a host
runtime embedding the simulator keeps its own log configuration.

The starting level is read from the ``QSPARSE_LOG_LEVEL`` environment
variable (a level name such as ``DEBUG``) and defaults to WARNING. At DEBUG
the simulator reports qubit allocation, release and measurement outcomes.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV_VAR = "QSPARSE_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_ROOT_NAME = "qsparse"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return level


def level_from_env(default: int = logging.WARNING) -> int:
    """
    Return the level named by ``QSPARSE_LOG_LEVEL``, or ``default``.

    Unknown names fall back to WARNING.
    """
    value = os.getenv(LOG_LEVEL_ENV_VAR)
    if not value:
        return default
    return _coerce_level(value)


_DEFAULT_LEVEL = level_from_env()


def _make_handler(stream: TextIO, level: int, format_string: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Args:
        name: Logger name, typically ``__name__``. Names outside the package
            are prefixed with ``qsparse.``. If None, returns the package
            logger ``qsparse``.

    Returns:
        Configured logger instance.

    Example:
        >>> from qsparse.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("allocated qubit %d", 0)
    """
    if name is None:
        name = _ROOT_NAME

    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT_NAME}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(sys.stderr, _DEFAULT_LEVEL, _DEFAULT_FORMAT))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every qsparse logger and of loggers created later.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or its name.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of every qsparse logger.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. Defaults to
            ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging
        >>> from qsparse.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    if stream is None:
        stream = sys.stderr
    if format_string is None:
        format_string = _DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(stream, level, format_string))

    _DEFAULT_LEVEL = level
