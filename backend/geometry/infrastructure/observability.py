"""Structured Logging — one JSON object per request event.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Route events add entity_id, operation and outcome; error handlers add
      error_code and path. Keys whose value is None are omitted
    - setup_logging replaces the handler it installed before, so calling it
      again (tests, reload) never duplicates lines

Design Decisions:
    - "text" format for local runs keeps operation/outcome visible inline
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("entity_id", "operation", "outcome", "error_code", "path")

_HANDLER_NAME = "geometry"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord and its geometry extras as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with operation/outcome appended when present."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        tags = " ".join(
            f"{key}={record.__dict__[key]}"
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        return f"{line} [{tags}]" if tags else line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the geometry handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
