"""JSON log formatter tests."""

import json
import logging
import sys

from wordbank.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "wordbank.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "wordbank.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_extra_fields_surfaced_when_present():
    log = json.loads(JSONFormatter().format(
        _record(word_id="abc", record_count=3, error_code="NO_WORDS"),
    ))
    assert log["word_id"] == "abc"
    assert log["record_count"] == 3
    assert log["error_code"] == "NO_WORDS"
    assert "path" not in log


def test_exception_text_included():
    try:
        raise ValueError("bad row")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad row" in log["exception"]


def test_non_ascii_kept_readable():
    out = JSONFormatter().format(_record("слово"))
    assert "слово" in out


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = setup_logging("debug", "json")
        second = setup_logging("warning", "text")
        ours = [h for h in root.handlers if h.get_name() == first.get_name()]
        assert ours == [second]
        assert isinstance(first.formatter, JSONFormatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = before
        root.setLevel(level)
