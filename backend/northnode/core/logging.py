"""
Structured logging setup.

Uses LOG_LEVEL from settings (northnode.core.config) and installs a JSON
formatter on the root logger. The engines only ever call get_logger(); the
API entrypoint and CLI tools call init_logging() once at startup.

Usage:
    from northnode.core.logging import init_logging, get_logger
    init_logging()
    log = get_logger(__name__)
    log.warning("invalid custom pattern", extra={"rule_id": "no-promo"})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from northnode.core.config import get_settings

__all__ = ["JsonFormatter", "init_logging", "get_logger"]

# Attributes every LogRecord carries; anything else arrived through `extra`.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """One JSON object per line with stable keys plus any `extra` fields."""

    default_time_format = "%Y-%m-%dT%H:%M:%S%z"

    def __init__(self, app_env: str = "development") -> None:
        super().__init__()
        self.app_env = app_env

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (shadow builtin)
        payload: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                self.default_time_format
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.app_env,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


_configured: bool = False


def _to_log_level(level: Optional[str]) -> int:
    resolved = logging.getLevelName((level or "INFO").upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def init_logging(stream: Optional[TextIO] = None) -> None:
    """
    Install the JSON handler on the root logger.
    Idempotent: safe to call multiple times.
    """
    global _configured
    if _configured:
        return

    settings = get_settings()
    level = _to_log_level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter(app_env=settings.app_env))
    root.addHandler(handler)

    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger; handlers come from init_logging()."""
    return logging.getLogger(name if name else "northnode")
