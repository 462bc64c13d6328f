"""Shared helpers for option-checker-lib."""

from oc_common.api import ConfigurationError, OCError, configure_logging

__all__ = ["ConfigurationError", "OCError", "configure_logging"]
