"""Structured Logging — one JSON line per event, tagged with employee and upstream context.

Invariants:
    - Every line carries timestamp, level, logger, service and message
    - Request context (employee_id, operation, attempt, status_code, error_code) kept when set
    - Re-running setup replaces our handler; lines are never duplicated
    - httpx's own per-request INFO lines suppressed; the upstream client logs its attempts

Design Decisions:
    - stdlib logging.Formatter subclass; `extra=` keys are the only structured channel
    - LOG_FORMAT=text for local runs and tests, json everywhere else
"""

import logging
import json
from datetime import datetime, timezone


SERVICE_NAME = "employee-api"

EXTRA_FIELDS = (
    "employee_id", "operation", "attempt", "status_code", "error_code",
    "delay_seconds", "method", "url", "path",
)


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _ServiceHandler(logging.StreamHandler):
    """Marker type so setup_logging can find and replace its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = _ServiceHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _ServiceHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return handler
