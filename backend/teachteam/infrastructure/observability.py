"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, role, error_code, path, ...) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated calls replace the handler it installed
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "user_id", "role", "error_code", "path", "method",
    "application_id", "candidate_id", "course_id", "lecturer_id",
)

_HANDLER_NAME = "teachteam"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
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
    # SQL echo stays opt-in
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
