from __future__ import annotations

import logging
import time
from logging.config import dictConfig
from typing import Any, Dict, Iterable, Sequence

from settings import get_settings

_DEFAULT_EXTRA_KEYS = (
    "task",
    "interval_ms",
    "entry_count",
    "threshold_ms",
    "removed_count",
    "reading_count",
    "trend",
    "restart_attempt",
    "backoff_ms",
)

# Feed, evictor and analyzer each log from their own thread.
_DEFAULT_FORMAT = "%(asctime)sZ | %(levelname)s | %(threadName)s | %(name)s | %(message)s"

_configured = False


class ContextualFormatter(logging.Formatter):
    """Formats timestamps in UTC and appends ``key=value`` for known extras."""

    converter = time.gmtime

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in self._extra_keys
            if getattr(record, key, None) is not None
        )
        return f"{message} | {context}" if context else message


def build_logging_config(level: str | int) -> Dict[str, Any]:
    """dictConfig payload: one stderr handler so stdout only carries reports."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "contextual": {
                "()": "logging_config.ContextualFormatter",
                "fmt": _DEFAULT_FORMAT,
                "datefmt": "%Y-%m-%dT%H:%M:%S",
                "style": "%",
                "extra_keys": list(_DEFAULT_EXTRA_KEYS),
            }
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "contextual",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {"handlers": ["stderr"], "level": level},
    }


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure process-wide logging once; ``force`` replaces an earlier setup."""
    global _configured
    if _configured and not force:
        return

    log_level = level if level is not None else get_settings().log_level
    dictConfig(build_logging_config(log_level))
    _configured = True
