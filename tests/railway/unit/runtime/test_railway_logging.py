from __future__ import annotations

import json
import logging
import sys

from railway.api.logging import JsonFormatter, RailwayLoggingConfig
from railway.runtime.logging import (
    configure_railway_logging,
    setup_railway_logging,
    shutdown_railway_logging,
)


def test_setup_railway_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("RAILWAY_LOG_LEVEL", "DEBUG")
        monkeypatch.delenv("RAILWAY_LOG_FILE", raising=False)
        setup_railway_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_railway_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_railway_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_railway_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "nested" / "railway.jsonl"
    try:
        configure_railway_logging(
            RailwayLoggingConfig(level_name="INFO", file_path=str(log_file), file_format="json")
        )
        logging.getLogger("railway.test").warning("track_position_conflict", extra={"owner": "app"})
        shutdown_railway_logging()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["level"] == "WARNING"
        assert record["logger"] == "railway.test"
        assert record["msg"] == "track_position_conflict"
        assert record["fields"] == {"owner": "app"}
    finally:
        shutdown_railway_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "railway.test", logging.ERROR, __file__, 1, "failed", None, exc_info=sys.exc_info()
        )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "failed"
    assert "ValueError: boom" in payload["exc_info"]
