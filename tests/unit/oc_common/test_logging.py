"""Tests for logging configuration and env parsing."""

from __future__ import annotations

import logging

import pytest

from oc_common.config import parse_bool_env, parse_int_env
from oc_common.logging import _resolve_level, configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("value", "debug", "expected"),
    [
        (None, False, logging.INFO),
        (None, True, logging.DEBUG),
        ("warning", False, logging.WARNING),
        ("10", False, logging.DEBUG),
        (logging.ERROR, False, logging.ERROR),
        ("nonsense", False, logging.INFO),
    ],
)
def test_resolve_level(value, debug, expected) -> None:
    assert _resolve_level(value, debug) == expected


def test_configure_logging_honours_env(monkeypatch, tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "oc.log"
    monkeypatch.setenv("OC_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("OC_LOG_JSON", "1")
    monkeypatch.setenv("OC_LOG_FILE", str(log_file))

    configure_logging(force=True)
    logging.getLogger("oc_core.test").warning("capped")

    root = restore_root_logger
    assert root.level == logging.WARNING
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    for handler in root.handlers:
        handler.flush()
    assert '"event": "capped"' in log_file.read_text()


def test_parse_env_helpers() -> None:
    assert parse_bool_env(None) is None
    assert parse_bool_env(" Yes ") is True
    assert parse_bool_env("off") is False
    assert parse_int_env("7") == 7
    assert parse_int_env("seven") is None
    assert parse_int_env(None) is None
