# tests/unit/infrastructure/logging/test_json_logger.py
from __future__ import annotations

import json
import logging
import sys

import pytest

from skillsnap_api.infrastructure.logging.logger import (
    _JsonFormatter,
    configure_root_logging,
    get_request_id,
    set_request_context,
)


def _render(msg: str, *, exc_info: object = None, **extra: object) -> dict:
    """Build a record with arbitrary extras and return the parsed JSON line."""
    logger = logging.getLogger("test.skillsnap")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn="test_json_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,  # type: ignore[arg-type]
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return json.loads(_JsonFormatter().format(record))


def test_configure_root_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        configure_root_logging()
        configure_root_logging()

        assert root.level == logging.DEBUG
        json_handlers = [h for h in root.handlers if isinstance(h.formatter, _JsonFormatter)]
        assert len(json_handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_stable_keys_and_extras() -> None:
    payload = _render("list_cache.hit", cache_key="projects_list", size=3)

    assert payload["message"] == "list_cache.hit"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.skillsnap"
    assert "ts" in payload
    assert payload["cache_key"] == "projects_list"
    assert payload["size"] == 3


def test_unserializable_extras_are_stringified() -> None:
    payload = _render("x", when=object)
    assert payload["when"] == str(object)


def test_request_id_from_context() -> None:
    set_request_context(request_id="rid-42")
    try:
        assert get_request_id() == "rid-42"
        assert _render("with-context")["request_id"] == "rid-42"
        assert _render("record-wins", request_id="rid-1")["request_id"] == "rid-1"
    finally:
        set_request_context(request_id=None)

    assert "request_id" not in _render("no-context")


def test_exception_details() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        payload = _render("failure", exc_info=sys.exc_info())

    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"
