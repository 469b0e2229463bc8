"""Logging setup shared by every flowcut module.

All package loggers hang off a single ``flowcut`` logger that owns the only
handler. Modules call ``get_logger(__name__)`` and never attach handlers of
their own, so one call to ``set_global_log_level`` retunes the whole package.

The initial level comes from the ``FLOWCUT_LOG_LEVEL`` environment variable
(a level name such as ``DEBUG`` or ``WARNING``) and falls back to INFO.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowcut"
LOG_LEVEL_ENV = "FLOWCUT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name like ``"debug"`` into its numeric value.

    Unknown or empty names yield ``default``.
    """
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``flowcut`` logger.

    Only the first call has an effect; ``reset_logging()`` re-arms it.

    Args:
        level: Initial level. Read from ``FLOWCUT_LOG_LEVEL`` when omitted.
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Destination; a stdout ``StreamHandler`` when omitted.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = level_from_name(os.getenv(LOG_LEVEL_ENV))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the Python root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package root if needed.

    The returned logger has no handlers and defers its level to ``flowcut``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handler."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log augmentations and other DEBUG records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next logger request reconfigures it."""
    global _configured
    _configured = False
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
