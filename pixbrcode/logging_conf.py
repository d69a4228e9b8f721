"""Logging configuration helpers."""
from __future__ import annotations

import json
import logging
from logging.config import dictConfig
from typing import Any

from .config import settings

_RESERVED_KEYS = frozenset(
    {
        "name",
        "msg",
        "message",
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
        "process",
        "processName",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object, merging ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - overrides base
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({k: v for k, v in record.__dict__.items() if k not in _RESERVED_KEYS})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure global logging based on settings; arguments override them."""

    level = (level or settings.logging.level).upper()
    use_json = settings.logging.json_logs if json_logs is None else json_logs
    formatter: dict[str, Any] = {"()": JsonFormatter} if use_json else {"format": "%(levelname)s %(name)s %(message)s"}

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": formatter},
            "handlers": {
                "default": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": level,
                }
            },
        }
    )
