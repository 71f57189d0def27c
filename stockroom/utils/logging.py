"""
Structured logging utilities for stockroom.

Stores, sources and the CLI share one configuration: a readable console
line by default, or one JSON object per record when `LOG_JSON` is set.
Context passed through `extra=` (collection, record id, counts) becomes
top-level keys of the JSON payload.

Logs go to stderr so tables printed on stdout stay clean.

Usage:
    from stockroom.utils.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=False)
    log = get_logger(__name__)
    log.info("[STORE] inventory loaded", extra={"collection": "inventory", "count": 6})
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came from `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}

# Driver loggers that are only interesting while debugging the backend.
_DRIVER_LOGGERS = ("psycopg", "psycopg.pool")


class JsonFormatter(logging.Formatter):
    """One JSON object per record with `extra=` context promoted to the top level."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key != "extra":
                payload[key] = value
        nested = getattr(record, "extra", None)
        if isinstance(nested, dict):
            payload.update(nested)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _logging_config(level: str, json_logs: bool) -> Dict[str, Any]:
    level = level.upper()
    driver_level = "DEBUG" if level == "DEBUG" else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json" if json_logs else "console",
            }
        },
        "loggers": {name: {"level": driver_level} for name in _DRIVER_LOGGERS},
        "root": {"handlers": ["stderr"], "level": level},
    }


def configure_logging(level: str = "INFO", json_logs: bool = False, force: bool = True) -> None:
    """
    Configure stockroom logging.

    Parameters
    ----------
    level : str
        Level name for the root logger (e.g. "DEBUG", "INFO").
    json_logs : bool
        Emit JSON objects instead of console lines.
    force : bool
        Replace an existing configuration. When False and the root logger
        already has handlers, nothing changes.
    """
    if not force and logging.getLogger().handlers:
        return
    logging.config.dictConfig(_logging_config(level, json_logs))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
