"""Logging utilities for optverify.

Diagnostics produced while validating a problem are written to module
loggers created here, in addition to being returned on the result.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Get or create the logger for an optverify module.

    Names outside the package are placed under ``optverify.``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Upper bound violation at 3")
    """
    if not name.startswith("optverify."):
        name = f"optverify.{name}"

    if name not in _loggers:
        logger = logging.getLogger(name)
        _attach_handler(logger, sys.stderr, logging.Formatter(_DEFAULT_FORMAT), _DEFAULT_LEVEL)
        logger.propagate = False
        _loggers[name] = logger
    return _loggers[name]


def _attach_handler(logger: logging.Logger, stream, formatter: logging.Formatter, level: int) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the level of every optverify logger, by number or by name."""
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
    stream: Optional[object] = None,
) -> None:
    """Send optverify diagnostics to ``stream`` (default stderr).

    Replaces the handler of every optverify logger and sets the level used
    for loggers created later.

    Example:
        >>> import io, logging
        >>> configure_logging(level=logging.ERROR, stream=io.StringIO())
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        _attach_handler(logger, stream or sys.stderr, formatter, level)

    _DEFAULT_LEVEL = level
