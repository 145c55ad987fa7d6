"""Tests for logging configuration."""
import json
import logging

from mpesa_qr.logging_conf import JsonFormatter, configure_logging


def _record(**extra):
    record = logging.LogRecord("mpesa_qr.test", logging.INFO, __file__, 1, "payload %s", ("rejected",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    line = JsonFormatter().format(_record(code="ERR_INVALID_FORMAT", payment_type="till"))

    data = json.loads(line)
    assert data["level"] == "INFO"
    assert data["logger"] == "mpesa_qr.test"
    assert data["message"] == "payload rejected"
    assert data["code"] == "ERR_INVALID_FORMAT"
    assert data["payment_type"] == "till"
    assert "lineno" not in data


def test_configure_logging_installs_json_handler():
    configure_logging(level="debug", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)


def test_configure_logging_plain_text():
    configure_logging(level="WARNING", json_logs=False)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
