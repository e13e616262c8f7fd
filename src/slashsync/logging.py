"""Logging configuration for slashsync.

Attaches a handler to the ``slashsync`` logger, either on stderr or on a
file under ~/.slashsync/logs/, and records sync failures with full
tracebacks while handing callers a short message.
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "slashsync"

# Directory for log files
LOGS_DIR = Path.home() / ".slashsync" / "logs"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handler: Optional[logging.Handler] = None
_log_path: Optional[Path] = None


def get_log_path(name: str) -> Path:
    """Get the log file path for a bot instance name."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / f"{name}.log"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_path: Optional[Path] = None,
) -> logging.Handler:
    """Attach a formatted handler to the slashsync logger.

    Replaces any handler installed by a previous call.

    Args:
        level: Logging level, as int or name ("DEBUG", "INFO", ...)
        log_path: Write to this file instead of stderr

    Returns:
        The installed handler
    """
    global _handler, _log_path

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    close_logging()

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    else:
        _handler = logging.StreamHandler()
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(_handler)
    logger.setLevel(level)

    _log_path = log_path
    return _handler


def close_logging() -> None:
    """Remove and close the handler installed by configure_logging."""
    global _handler, _log_path

    if _handler is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_handler)
        _handler.close()
        _handler = None
        _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Path of the active log file, or None when logging to stderr or not configured."""
    return _log_path


def log_exception(
    error: Exception,
    context: str = "",
    include_traceback: bool = True,
) -> str:
    """Log an exception with full details and return a one-line message.

    Args:
        error: The exception to log
        context: What was happening when it was raised
        include_traceback: Whether to include the traceback in the log

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger(LOGGER_NAME)

    error_type = type(error).__name__
    error_msg = str(error).split("\n")[0]

    if context:
        user_msg = f"{context}: {error_msg}"
    else:
        user_msg = f"{error_type}: {error_msg}"

    if include_traceback:
        tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        logger.error(f"{context}\n{error_type}: {error}\n\nTraceback:\n{tb_str}")
    else:
        logger.error(f"{context} - {error_type}: {error}")

    return user_msg
