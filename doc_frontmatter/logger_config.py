"""Logging setup for doc-frontmatter.

All loggers live under the ``doc_frontmatter`` namespace. Nothing is
attached to them until ``configure_logging`` runs, so library users keep
full control of their own logging tree; the CLI configures it on startup.
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime
from datetime import timezone
from enum import Enum
from logging.handlers import RotatingFileHandler
from typing import Any

from .config import Settings
from .config import get_settings

# --- Logging Setup ---
logger = logging.getLogger("doc_frontmatter")
error_logger = logging.getLogger("doc_frontmatter.errors")

# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class ErrorCategory(Enum):
    """Severity buckets used for structured error records."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_CATEGORY_LEVELS = {
    ErrorCategory.CRITICAL: logging.CRITICAL,
    ErrorCategory.ERROR: logging.ERROR,
    ErrorCategory.WARNING: logging.WARNING,
    ErrorCategory.INFO: logging.INFO,
}


class StructuredLogFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        for key, value in vars(record).items():
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def configure_logging(settings: Settings | None = None, force: bool = False) -> logging.Logger:
    """Attach a handler to the package logger.

    Safe to call repeatedly; a second call is a no-op unless ``force`` is set.
    """
    settings = settings or get_settings()

    if logger.handlers and not force:
        return logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings.log_file_path is not None:
        settings.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        # maxBytes: 10MB per file, backupCount: 5 files (total ~50MB)
        handler: logging.Handler = RotatingFileHandler(
            settings.log_file_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler()

    if settings.structured_logging:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger


def log_structured_error(
    category: ErrorCategory,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    operation: str | None = None,
    **kwargs: Any,
) -> None:
    """Log an error record with a category, an operation name and context fields."""
    extra: dict[str, Any] = {"error_category": category.value}
    if operation:
        extra["operation"] = operation
    if context:
        extra.update(context)
    extra.update(kwargs)

    if exception is not None:
        extra["exception_type"] = type(exception).__name__
        to_dict = getattr(exception, "to_dict", None)
        if callable(to_dict):
            extra["error_details"] = to_dict()

    error_logger.log(
        _CATEGORY_LEVELS[category],
        message,
        exc_info=exception if exception is not None else None,
        extra=extra,
    )
