"""Scripted interactions replayed against a SelectionController."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from oc_common.errors import ScriptError, wrap_error
from oc_core.api import SelectionController, controller_from_settings

logger = logging.getLogger(__name__)

CHECK_ALL = "check_all"


class ReplayScript(BaseModel):
    """Controller settings, an option list and the actions to apply in order."""

    checker: dict[str, Any] = Field(default_factory=dict)
    options: list[dict[str, Any]] = Field(default_factory=list)
    actions: list[str | dict[str, Any]] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


@dataclass(frozen=True)
class ReplayStep:
    index: int
    action: str
    value: Any
    changed: bool
    selection: Any


@dataclass
class ReplayResult:
    controller: SelectionController
    steps: list[ReplayStep] = field(default_factory=list)


def load_script(path: Path) -> ReplayScript:
    """Read and validate a YAML replay script."""
    if not path.exists():
        raise FileNotFoundError(f"Script file not found: {path}")
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ScriptError(
            "Script must contain a mapping at the top level.", context={"path": path}
        )
    try:
        return ReplayScript(**data)
    except ValidationError as exc:
        raise wrap_error(
            ScriptError,
            f"Invalid replay script: {exc.errors()[0]['msg']}",
            context={"path": path},
            cause=exc,
        ) from exc


def _parse_action(raw: str | dict[str, Any], index: int) -> tuple[str, Any]:
    if raw == CHECK_ALL:
        return CHECK_ALL, None
    if isinstance(raw, dict) and set(raw) == {"check"}:
        return "check", raw["check"]
    raise ScriptError(
        f"Unsupported action at position {index}: {raw!r}",
        context={"index": index, "action": raw},
    )


def replay(script: ReplayScript) -> ReplayResult:
    """Build a controller from ``script`` and apply its actions in order."""
    controller = controller_from_settings(script.checker)
    controller.set_options(script.options)
    result = ReplayResult(controller=controller)

    for index, raw in enumerate(script.actions, start=1):
        action, value = _parse_action(raw, index)
        if action == CHECK_ALL:
            changed = controller.check_all()
        else:
            changed = controller.check(value)
        logger.debug("Step %d %s %r changed=%s", index, action, value, changed)
        result.steps.append(
            ReplayStep(
                index=index,
                action=action,
                value=value,
                changed=changed,
                selection=controller.selection,
            )
        )
    return result
