"""Field access for host-supplied option records."""

from __future__ import annotations

from typing import Any, Callable, Mapping

ValueGetter = Callable[[Any], Any]
DisabledPredicate = Callable[[Any], bool]

_MISSING = object()


def _lookup(option: Any, field: str, default: Any = None) -> Any:
    if isinstance(option, Mapping):
        return option.get(field, default)
    return getattr(option, field, default)


class OptionAccessor:
    """Reads value and disabled flag from arbitrary option shapes.

    Records are mappings (key lookup) or objects (attribute lookup) using the
    configured field names. Explicit callables replace the field lookup for
    their half of the pair.
    """

    def __init__(
        self,
        value_field: str = "value",
        disabled_field: str = "disabled",
        *,
        get_value: ValueGetter | None = None,
        is_disabled: DisabledPredicate | None = None,
    ) -> None:
        self.value_field = value_field
        self.disabled_field = disabled_field
        self._get_value = get_value
        self._is_disabled = is_disabled

    def value_of(self, option: Any) -> Any:
        if self._get_value is not None:
            return self._get_value(option)
        return _lookup(option, self.value_field)

    def is_disabled(self, option: Any) -> bool:
        # Only a literal True blocks; missing, None, "false" or 1 do not.
        if self._is_disabled is not None:
            return bool(self._is_disabled(option))
        return _lookup(option, self.disabled_field, False) is True

    def is_record(self, candidate: Any) -> bool:
        """Return True if candidate is an option record rather than a bare value."""
        if self._get_value is not None:
            return True
        return _lookup(candidate, self.value_field, _MISSING) is not _MISSING
