"""Selection state for the two checker modes.

Each class owns the selected value(s) and applies the toggle rules of its
mode. Methods return True when the selection changed and False when the
request was rejected or had no effect; rejections never raise.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from oc_core.models import CheckerMode

logger = logging.getLogger(__name__)


class _SingleSelection:
    """Radio semantics: at most one value, replaced on every check."""

    mode = CheckerMode.SINGLE

    def __init__(self) -> None:
        self._value: Any = None

    @property
    def current(self) -> Any:
        return self._value

    @property
    def count(self) -> int:
        return 0 if self._value is None else 1

    def contains(self, value: Any) -> bool:
        return self._value is not None and self._value == value

    def toggle(self, value: Any, effective_max: int) -> bool:
        if self._value == value:
            return False
        self._value = value
        return True

    def toggle_all(self, enabled_values: Sequence[Any]) -> bool:
        logger.debug("check_all ignored in %s mode", self.mode.name)
        return False

    def all_active(self, enabled_count: int) -> bool:
        return False

    def is_full(self, effective_max: int) -> bool:
        return False

    def prune(self, valid_values: Iterable[Any]) -> bool:
        if self._value is None or self._value in list(valid_values):
            return False
        self._value = None
        return True


class _MultiSelection:
    """Checkbox semantics bounded by ``minimum`` and the effective max."""

    mode = CheckerMode.MULTI

    def __init__(self, minimum: int = 0) -> None:
        self.minimum = minimum
        self._values: list[Any] = []

    @property
    def current(self) -> list[Any]:
        return list(self._values)

    @property
    def count(self) -> int:
        return len(self._values)

    def contains(self, value: Any) -> bool:
        return value in self._values

    def toggle(self, value: Any, effective_max: int) -> bool:
        if value in self._values:
            if len(self._values) <= self.minimum:
                logger.debug(
                    "Deselect of %r blocked: %d selected, min %d",
                    value,
                    len(self._values),
                    self.minimum,
                )
                return False
            self._values.remove(value)
            return True

        if effective_max == 1:
            # Single slot expressed through the multi API: replace outright.
            self._values = [value]
            return True

        if len(self._values) >= effective_max:
            logger.debug(
                "Select of %r blocked: selection full at %d", value, effective_max
            )
            return False
        self._values.append(value)
        return True

    def toggle_all(self, enabled_values: Sequence[Any]) -> bool:
        if len(self._values) == len(enabled_values):
            if not self._values:
                return False
            self._values = []
            return True
        # Select-all overrides min/max on purpose.
        self._values = list(enabled_values)
        return True

    def all_active(self, enabled_count: int) -> bool:
        return len(self._values) == enabled_count

    def is_full(self, effective_max: int) -> bool:
        return len(self._values) >= effective_max

    def prune(self, valid_values: Iterable[Any]) -> bool:
        valid = list(valid_values)
        kept = [value for value in self._values if value in valid]
        if len(kept) == len(self._values):
            return False
        self._values = kept
        return True


SelectionState = _SingleSelection | _MultiSelection


def build_selection_state(mode: CheckerMode, minimum: int = 0) -> SelectionState:
    """Pick the state class for ``mode`` once, at construction."""
    if mode is CheckerMode.SINGLE:
        return _SingleSelection()
    return _MultiSelection(minimum)
