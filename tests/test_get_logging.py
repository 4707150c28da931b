import json
import logging

from mortgage_calc.logger import JsonFormatter, setup_logging


def make_record(**extra):
    record = logging.LogRecord("mortgage_calc.audit", logging.INFO, __file__, 1, "REQUEST: %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    data = json.loads(JsonFormatter().format(make_record(request_id="req-1", event="calc_request")))
    assert data["level"] == "INFO"
    assert data["message"] == "REQUEST: x"
    assert data["logger"] == "mortgage_calc.audit"
    assert data["request_id"] == "req-1"
    assert data["event"] == "calc_request"
    assert "timestamp" in data


def test_json_formatter_without_extra():
    data = json.loads(JsonFormatter().format(make_record()))
    assert "request_id" not in data


def test_setup_logging_is_idempotent():
    root = setup_logging()
    setup_logging()
    json_handlers = [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1
