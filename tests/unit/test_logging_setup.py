import json
import logging
import sys

from letshang.core.logging_setup import JsonFormatter


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="letshang.request",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Request completed",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    return logging.LogRecord(**defaults)


def test_formatter_emits_one_json_object_with_extras():
    record = _record()
    record.request_id = "req-1"
    record.status_code = 200

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "letshang.request"
    assert payload["message"] == "Request completed"
    assert payload["request_id"] == "req-1"
    assert payload["status_code"] == 200
    assert "lineno" not in payload


def test_formatter_includes_exception_text():
    try:
        raise ValueError("bad row")
    except ValueError:
        record = _record(level=logging.ERROR, msg="Get users error", exc_info=sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert "ValueError: bad row" in payload["exception"]
