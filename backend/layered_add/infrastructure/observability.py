"""Structured Logging — JSON formatter and setup for the process and the HTTP app.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operand, result, error_code, timeout_seconds, path) surfaced when present
    - setup_logging replaces any handler it installed earlier (idempotent)
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("operand", "result", "error_code", "timeout_seconds", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _LayeredAddHandler(logging.StreamHandler):
    """Marker subclass so repeated setup_logging calls can find their own handler."""


def setup_logging(level: str = "INFO", fmt: str = "text"):
    """Configure root logging."""
    handler = _LayeredAddHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _LayeredAddHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
