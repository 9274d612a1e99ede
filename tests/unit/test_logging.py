"""Tests for JSON log formatting."""

import json
import logging
import sys

from devicehub.common.logging import JSONFormatter, get_logger, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("devicehub.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "devicehub.test"
        assert entry["message"] == "hello"
        assert "request_id" not in entry

    def test_request_id_included(self):
        entry = json.loads(JSONFormatter().format(_record(request_id="ab12cd34")))
        assert entry["request_id"] == "ab12cd34"

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetup:
    def test_setup_is_idempotent(self):
        setup_logging("DEBUG")
        setup_logging("INFO")
        root = logging.getLogger("devicehub")
        json_handlers = [h for h in root.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1
        assert root.level == logging.INFO

    def test_get_logger_namespace(self):
        assert get_logger("database").name == "devicehub.database"
