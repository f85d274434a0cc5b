"""Logging setup for the ``tasktrail`` logger hierarchy."""

from __future__ import annotations

import json
import logging

from tasktrail.utils import now_utc

LOGGER_NAME = "tasktrail"

_EXTRA_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "user_id",
    "todo_id",
    "action",
)


class JSONFormatter(logging.Formatter):
    """Render records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": now_utc().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a JSON stream handler to the application logger once."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_tasktrail_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        handler._tasktrail_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    # Records are written once, as JSON, by the handler above.
    logger.propagate = False
    return logger


__all__ = ["JSONFormatter", "LOGGER_NAME", "configure_logging"]
