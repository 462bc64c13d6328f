"""Selection-state controller for selectable option lists."""

from oc_core.api import (
    CheckerConfig,
    CheckerMode,
    Option,
    SelectionChange,
    SelectionController,
    SelectionSnapshot,
    create_selection_controller,
    load_checker_config,
)

__all__ = [
    "CheckerConfig",
    "CheckerMode",
    "Option",
    "SelectionChange",
    "SelectionController",
    "SelectionSnapshot",
    "create_selection_controller",
    "load_checker_config",
]
