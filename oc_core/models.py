"""Value types shared by the selection controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CheckerMode(str, Enum):
    """Selection cardinality model, fixed at construction."""

    SINGLE = "radio"
    MULTI = "checkbox"


@dataclass(frozen=True)
class Option:
    """A selectable entry for hosts without their own record type."""

    value: Any
    label: str = ""
    disabled: bool = False


@dataclass(frozen=True)
class SelectionChange:
    """Emitted to subscribers after an operation changed the selection."""

    action: str  # check | check_all | set_options
    value: Any
    previous: Any
    current: Any


@dataclass(frozen=True)
class SelectionSnapshot:
    mode: CheckerMode
    selection: Any
    enabled_values: list[Any]
    effective_max: int
    all_active: bool
    is_full: bool

    @property
    def count(self) -> int:
        if self.mode is CheckerMode.SINGLE:
            return 0 if self.selection is None else 1
        return len(self.selection)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "selection": self.selection,
            "count": self.count,
            "enabled_values": list(self.enabled_values),
            "effective_max": self.effective_max,
            "all_active": self.all_active,
            "is_full": self.is_full,
        }
