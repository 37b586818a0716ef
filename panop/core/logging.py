"""PANOP — Structured JSON Logging.

One stdout handler sits on the ``panop`` parent logger; module loggers only
propagate to it, so the level can be changed in one place at configure time.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional

from panop.config import settings

ROOT_LOGGER = "panop"

# Fields callers may pass through ``extra=``
EXTRA_FIELDS = ("method", "path", "status_code", "entity_id", "duration_ms")


class JSONFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(
            {key: getattr(record, key) for key in EXTRA_FIELDS if hasattr(record, key)}
        )
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
        root.propagate = False
        set_log_level(settings.log_level)
    return root


def set_log_level(level: Optional[str]) -> None:
    """Apply a level name such as "DEBUG"; unknown names fall back to INFO."""
    name = (level or "INFO").upper()
    logging.getLogger(ROOT_LOGGER).setLevel(getattr(logging, name, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return ``panop.<name>``, installing the shared JSON handler on first use."""
    _root_logger()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
