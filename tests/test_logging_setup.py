from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from roster_engine.logging_setup import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def test_json_formatter_includes_known_extras() -> None:
    record = logging.LogRecord("roster", logging.ERROR, __file__, 1, "save %s", ("failed",), None)
    record.organization_id = "o1"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "roster"
    assert payload["message"] == "save failed"
    assert payload["organization_id"] == "o1"
    assert "member_id" not in payload


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_installs_handler_and_level() -> None:
    handler = setup_logging("debug", "json")

    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_unknown_level_defaults_to_info() -> None:
    setup_logging("nonsense", "text")

    assert logging.root.level == logging.INFO


def test_setup_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        setup_logging("INFO", "xml")


def test_json_timestamp_is_event_time() -> None:
    record = logging.LogRecord("roster", logging.INFO, __file__, 1, "hello", None, None)
    record.created = 0.0

    payload = json.loads(JSONFormatter().format(record))

    assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_twice_keeps_a_single_handler() -> None:
    first = setup_logging("INFO", "text")
    second = setup_logging("INFO", "json")

    assert first not in logging.root.handlers
    assert [h for h in logging.root.handlers if h.get_name() == second.get_name()] == [second]
