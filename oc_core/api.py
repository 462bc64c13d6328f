"""Public API surface for oc_core."""

from __future__ import annotations

from typing import Any

from oc_core.accessors import DisabledPredicate, OptionAccessor, ValueGetter
from oc_core.config import CheckerConfig, build_checker_config, load_checker_config
from oc_core.controller import SelectionController, SelectionListener
from oc_core.models import CheckerMode, Option, SelectionChange, SelectionSnapshot


def create_selection_controller(
    *,
    mode: CheckerMode | str = CheckerMode.MULTI,
    min: int = 0,
    max: int | None = None,
    value_field: str = "value",
    disabled_field: str = "disabled",
    prune_stale: bool = False,
    get_value: ValueGetter | None = None,
    is_disabled: DisabledPredicate | None = None,
) -> SelectionController:
    """Validate the arguments and build a SelectionController.

    Raises ConfigurationError for negative ``min``, non-positive ``max``,
    ``min > max``, empty field names or an unknown mode.
    """
    config = build_checker_config(
        mode=mode,
        min=min,
        max=max,
        value_field=value_field,
        disabled_field=disabled_field,
        prune_stale=prune_stale,
    )
    return SelectionController(config, get_value=get_value, is_disabled=is_disabled)


def controller_from_settings(settings: dict[str, Any], **accessors: Any) -> SelectionController:
    """Build a controller from a plain settings mapping (e.g. a YAML section)."""
    return SelectionController.from_config(build_checker_config(**settings), **accessors)


__all__ = [
    "CheckerConfig",
    "CheckerMode",
    "DisabledPredicate",
    "Option",
    "OptionAccessor",
    "SelectionChange",
    "SelectionController",
    "SelectionListener",
    "SelectionSnapshot",
    "ValueGetter",
    "build_checker_config",
    "controller_from_settings",
    "create_selection_controller",
    "load_checker_config",
]
