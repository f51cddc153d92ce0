"""Centralized logging configuration.

Logs are emitted as one JSON object per line on stdout so a container
runtime can ship them as-is. Request metadata travels on records through
`extra=`; the formatter must never raise when a field is absent (third-party
loggers such as uvicorn's never set them).
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import UTC, datetime
from typing import Any

# Optional `extra` fields copied into the payload when present on a record.
_EXTRA_FIELDS = (
    "request_id",
    "http_method",
    "request_path",
    "status_code",
    "duration_ms",
    "environment",
    "docs_enabled",
    "https_redirect",
)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line, skipping missing extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging (JSON to stdout)."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "event_tickets.core.logging.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                # uvicorn's access log duplicates HttpLoggingMiddleware.
                "uvicorn.access": {"level": "WARNING"},
            },
            "root": {
                "level": level.upper(),
                "handlers": ["default"],
            },
        }
    )
