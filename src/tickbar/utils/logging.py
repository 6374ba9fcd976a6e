"""Centralized logging utilities for tickbar.

Provides a single place to configure logging and fetch namespaced loggers.
"""

from __future__ import annotations

import logging
import warnings
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Log rotation settings
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path, max_bytes: int, backup_count: int) -> Optional[logging.Handler]:
    """Rotating DEBUG-level handler, or None when the file cannot be opened."""
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    except OSError as e:
        warnings.warn(f"Failed to create log file {log_file}: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """(Re)configure the 'tickbar' logger.

    Console records use the short format at ``level``; a rotating log file,
    when given, receives everything at DEBUG. Calling this again replaces the
    previous handlers. Progress lines are written to their own sink and never
    go through logging.
    """
    logging.getLogger().setLevel(logging.WARNING)

    app_logger = logging.getLogger("tickbar")
    app_logger.setLevel(level)
    app_logger.propagate = False
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

    app_logger.addHandler(_console_handler(level))
    if log_file:
        handler = _file_handler(Path(log_file), max_bytes, backup_count)
        if handler is not None:
            app_logger.addHandler(handler)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Translate a config-file level name ('info', 'DEBUG', ...) to a logging level."""
    return LEVEL_NAMES.get(str(name).upper(), default)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger under 'tickbar' root."""
    base = logging.getLogger("tickbar")
    return base.getChild(name)


class LogTemplates:
    """Standard log message templates shared by the adapters and the CLI."""

    TRAVERSAL_START = "Starting traversal: {prefix!r} total={total} holder={holder}"
    TRAVERSAL_DONE = "Finished traversal: {prefix!r} {done} item(s) in {elapsed:.2f}s"
    MANUAL_SET_IGNORED = "manual_set({fraction}) ignored: total is unknown"

    CONFIG_LOADED = "Loaded configuration from {path}"
    DEMO_START = "Running demo: {name}"
