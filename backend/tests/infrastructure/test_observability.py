"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from teachteam.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "teachteam.test", logging.WARNING, __file__, 1, "Something happened", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extra_fields():
    payload = json.loads(JSONFormatter().format(
        _record(user_id="u1", error_code="CONFLICT", unrelated="x"),
    ))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Something happened"
    assert payload["user_id"] == "u1"
    assert payload["error_code"] == "CONFLICT"
    assert "unrelated" not in payload


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    named = [h for h in logging.root.handlers if h.get_name() == "teachteam"]
    assert len(named) == 1
    assert logging.root.level == logging.INFO
