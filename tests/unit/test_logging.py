from __future__ import annotations

import json
import logging
import sys

from employee_manager.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_EMPLOYEE_ID = 10


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.employee_id = EXPECTED_EMPLOYEE_ID
    record.path = "employees.json"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["employee_id"] == EXPECTED_EMPLOYEE_ID
    assert payload["path"] == "employees.json"
    assert "lineno" not in payload
    assert "pathname" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "test.logger", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_sets_root_level_and_formatter() -> None:
    configure_logging(level="debug", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
