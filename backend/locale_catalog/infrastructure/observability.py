"""Structured Logging — JSON formatter and setup for the catalog service.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Catalog fields (country_code, culture, record_kind, record_count,
      catalog_state, error_code, duration_ms) surfaced when present
    - setup_logging() is idempotent: calling it again replaces its own handler
      instead of stacking a second one

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - Enum extras (LoadState, RecordKind) serialize by value via default=
    - setup_logging called once per app lifespan; the test client restarts the
      lifespan, so the handler is tagged and swapped
"""

import logging
import json
from datetime import datetime, timezone
from enum import Enum

_EXTRA_FIELDS = (
    "country_code", "culture", "record_kind", "record_count", "catalog_state",
    "operation", "error_code", "duration_ms", "path",
)
_HANDLER_NAME = "locale_catalog"


def _json_default(value):
    if isinstance(value, Enum):
        return value.value
    return str(value)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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
        return json.dumps(log, ensure_ascii=False, default=_json_default)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the locale-catalog handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
