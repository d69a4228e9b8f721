"""Tests for logging configuration."""
import json
import logging
import sys

from pixbrcode.logging_conf import JsonFormatter, configure_logging


def _record(**extra):
    record = logging.LogRecord("pixbrcode.brcode", logging.WARNING, __file__, 1, "brcode validation failed", None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_merges_extra_fields():
    line = JsonFormatter().format(_record(code="ERR_REQUIRED", field="key"))
    payload = json.loads(line)
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "pixbrcode.brcode"
    assert payload["message"] == "brcode validation failed"
    assert payload["code"] == "ERR_REQUIRED"
    assert payload["field"] == "key"
    assert "lineno" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_sets_root_level_and_formatter():
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

        configure_logging(level="WARNING", json_logs=False)
        assert root.level == logging.WARNING
        assert not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
