"""Logging configuration shared by the core, adapters and CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED: set[str] = set()
_level: int | str = logging.WARNING


def setup_logger(name: str) -> logging.Logger:
    """Return a logger with a Rich handler on stderr.

    Args:
        name: Logger name (usually ``__name__`` of the module).

    Returns:
        Configured logger instance.
    """

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(_level)

        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setLevel(logging.NOTSET)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        _CONFIGURED.add(name)

    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every logger created through `setup_logger`, now and later."""

    global _level
    if isinstance(level, str):
        level = level.upper()
    _level = level
    for name in _CONFIGURED:
        logging.getLogger(name).setLevel(level)
