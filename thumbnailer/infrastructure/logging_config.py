"""
Logging configuration for the thumbnailer.

Log output goes to stderr: stdout may carry image bytes (``single --stdout``).
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from thumbnailer.infrastructure.config import LoggingSettings

_HANDLER_NAME = "thumbnailer"

# Third-party loggers that are chatty below WARNING
_QUIET_LOGGERS = ("PIL",)


def resolve_level(level: Optional[str] = None, settings: Optional[LoggingSettings] = None) -> int:
    """Explicit *level*, else ``LOG_LEVEL`` from *settings*; unknown names mean INFO."""
    name = level or (settings or LoggingSettings()).level
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None, settings: Optional[LoggingSettings] = None) -> None:
    """Configure root logging. Calling it again replaces the previous handler."""
    log_level = resolve_level(level, settings)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME]:
        root_logger.removeHandler(existing)
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
