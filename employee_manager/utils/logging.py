"""
Logging setup shared by the CLI, the interactive shell and the storage layer.

Records go to stderr so they never mix with the menu on stdout. Operations
attach context through `extra=` (employee ids, file paths, record counts);
the JSON formatter lifts those keys to the top level of each line.

Usage:
    from employee_manager.utils.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=True)
    log = get_logger(__name__)
    log.info("Employee added", extra={"employee_id": 7})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


def _json_formatter(record: logging.LogRecord) -> str:
    """Serialize one record, with its `extra=` context, as a JSON line."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
        **_context_fields(record),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """
    Install a single stderr handler on the root logger.

    Parameters
    ----------
    level : str
        Level name, case-insensitive ("debug", "INFO", ...).
    json_logs : bool
        Emit JSON lines instead of the pipe-separated console format.
    """
    level_name = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": CONSOLE_FORMAT, "datefmt": CONSOLE_DATEFMT},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if json_logs else "console",
                    "level": level_name,
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"handlers": ["stderr"], "level": level_name},
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
