"""Logging configuration for vshelf.

Series detection only logs at DEBUG (rule hits, grouping summaries, cache
resets); hosts call setup_logging() once to route those records to a rich
console and, optionally, a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from vshelf.env_settings import get_env_settings

PACKAGE_LOGGER = "vshelf"

FILE_FORMAT = logging.Formatter(
    "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Console handler and the level it was configured with, for set_console_quiet()
_console_handler: logging.Handler | None = None
_console_level: int = logging.INFO


def _make_console_handler(rich_console: bool) -> logging.Handler:
    if rich_console:
        return RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,  # titles contain [brackets] after normalization
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    return handler


def setup_logging(
    log_level: str | None = None,
    log_file: Path | str | None = None,
    rich_console: bool = True,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure the vshelf package logger.

    Args:
        log_level: Logging level name; defaults to LOG_LEVEL from env settings.
            Unknown names fall back to INFO.
        log_file: Optional file path; the file always receives DEBUG records
        rich_console: Use rich handler for console output
        quiet_console: If True, only show WARNING+ on console

    Returns:
        The "vshelf" package logger
    """
    global _console_handler, _console_level

    if log_level is None:
        log_level = get_env_settings().app.log_level
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = _make_console_handler(rich_console)
    console_handler.setLevel(logging.WARNING if quiet_console else level)
    logger.addHandler(console_handler)
    _console_handler = console_handler
    _console_level = level

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FILE_FORMAT)
        logger.addHandler(file_handler)

    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return logger


def set_console_quiet(quiet: bool = True) -> None:
    """
    Toggle quiet mode for console logging.

    Quiet shows only WARNING and above; leaving quiet mode restores the
    level setup_logging() was called with.
    """
    if _console_handler is not None:
        _console_handler.setLevel(logging.WARNING if quiet else _console_level)
