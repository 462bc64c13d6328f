"""Error types raised by option-checker-lib and their CLI payloads."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


class OCError(Exception):
    """Base error carrying a JSON-friendly context mapping."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = _jsonable(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__


class ConfigurationError(OCError):
    """Controller settings rejected at construction."""


class ScriptError(OCError):
    """Replay script that cannot be read or contains an unknown action."""


E = TypeVar("E", bound=OCError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> E:
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: OCError) -> dict[str, Any]:
    """Shape an OCError for the CLI's ``--json`` output."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
