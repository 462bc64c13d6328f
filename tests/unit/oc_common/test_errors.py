"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from oc_common.errors import ConfigurationError, OCError, error_to_payload, wrap_error


pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = ConfigurationError(
        "boom",
        context={
            "path": Path("/tmp/test"),
            "count": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )
    payload = error_to_payload(err)
    assert payload["error_type"] == "ConfigurationError"
    assert payload["error"] == "boom"
    assert payload["error_context"]["path"].endswith("test")
    assert payload["error_context"]["count"] == 3
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["items"] == ["a", "b"]


def test_wrap_error_keeps_cause() -> None:
    cause = ValueError("bad max")
    err = wrap_error(ConfigurationError, "invalid", context={"max": 0}, cause=cause)

    assert isinstance(err, OCError)
    assert err.__cause__ is cause
    assert err.error_type == "ConfigurationError"
    assert err.context == {"max": 0}
