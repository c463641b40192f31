import io
import json
import logging

import pytest

from schemaf import log


@pytest.fixture
def captured():
    previous = log.get_logger()
    stream = io.StringIO()
    logger = logging.getLogger("schemaf.test.capture")
    logger.handlers.clear()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(log.JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    log.set_logger(logger)
    yield stream
    log.set_logger(previous)


def _entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_set_logger_replaces_global(captured):
    replacement = logging.getLogger("schemaf.test.other")
    log.set_logger(replacement)
    assert log.get_logger() is replacement


def test_info_writes_json_with_attributes(captured):
    log.info("server started", port=8000, host="localhost")
    entries = _entries(captured)
    assert len(entries) == 1
    entry = entries[0]
    assert entry["msg"] == "server started"
    assert entry["level"] == "INFO"
    assert entry["port"] == 8000
    assert entry["host"] == "localhost"
    assert "time" in entry


def test_warn_and_error_levels(captured):
    log.warn("careful")
    log.error("broken", code=7)
    entries = _entries(captured)
    assert [e["level"] for e in entries] == ["WARN", "ERROR"]
    assert [e["msg"] for e in entries] == ["careful", "broken"]
    assert entries[1]["code"] == 7


def test_debug_emitted_when_logger_allows(captured):
    log.debug("details", step="parse")
    entries = _entries(captured)
    assert len(entries) == 1
    assert entries[0]["msg"] == "details"
    assert entries[0]["step"] == "parse"


def test_default_logger_drops_debug():
    assert log.get_logger().isEnabledFor(logging.DEBUG) is False
    assert log.get_logger().isEnabledFor(logging.INFO) is True


def test_debug_filtered_below_level(captured):
    log.get_logger().setLevel(logging.INFO)
    log.debug("hidden")
    log.info("shown")
    assert [e["msg"] for e in _entries(captured)] == ["shown"]


def test_unserializable_attribute_is_stringified(captured):
    class Thing:
        def __str__(self):
            return "thing-repr"

    log.info("obj", value=Thing())
    assert _entries(captured)[0]["value"] == "thing-repr"