"""Public API surface for oc_common."""

from oc_common.config import parse_bool_env, parse_int_env
from oc_common.errors import (
    ConfigurationError,
    OCError,
    ScriptError,
    error_to_payload,
    wrap_error,
)
from oc_common.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "OCError",
    "ScriptError",
    "configure_logging",
    "error_to_payload",
    "parse_bool_env",
    "parse_int_env",
    "wrap_error",
]
