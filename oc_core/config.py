"""Controller configuration model and loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from oc_common.errors import ConfigurationError, wrap_error
from oc_core.models import CheckerMode

_MODE_ALIASES = {
    "single": CheckerMode.SINGLE,
    "radio": CheckerMode.SINGLE,
    "multi": CheckerMode.MULTI,
    "checkbox": CheckerMode.MULTI,
}


class CheckerConfig(BaseModel):
    """Validated construction arguments for a SelectionController."""

    mode: CheckerMode = Field(default=CheckerMode.MULTI, description="Selection model")
    min: int = Field(default=0, ge=0, description="Floor on retained selections (multi)")
    max: int | None = Field(
        default=None,
        gt=0,
        description="Cap on selections (multi); unset means the enabled option count",
    )
    value_field: str = Field(default="value", min_length=1)
    disabled_field: str = Field(default="disabled", min_length=1)
    prune_stale: bool = Field(
        default=False,
        description="Drop selected values missing from a replacement option list",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            key = value.strip().lower()
            if key not in _MODE_ALIASES:
                raise ValueError(f"Unsupported checker mode: {value}")
            return _MODE_ALIASES[key]
        return value

    @model_validator(mode="after")
    def _validate_bounds(self) -> "CheckerConfig":
        if self.max is not None and self.min > self.max:
            raise ValueError("min must be <= max")
        return self


def build_checker_config(**kwargs: Any) -> CheckerConfig:
    """Validate keyword arguments into a CheckerConfig.

    Unset (None) arguments fall back to model defaults, except ``max`` where
    None is meaningful. Validation failures surface as ConfigurationError.
    """
    data = {
        key: value for key, value in kwargs.items() if value is not None or key == "max"
    }
    try:
        return CheckerConfig(**data)
    except ValidationError as exc:
        raise wrap_error(
            ConfigurationError,
            f"Invalid checker configuration: {exc.errors()[0]['msg']}",
            context={"arguments": data, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc


def load_checker_config(path: Path) -> CheckerConfig:
    """Load a CheckerConfig from a YAML file.

    The document may hold the settings directly or under a ``checker`` key.
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping at the top level.",
            context={"path": path},
        )
    section = data.get("checker", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Config section 'checker' must be a mapping.", context={"path": path}
        )
    return build_checker_config(**section)
