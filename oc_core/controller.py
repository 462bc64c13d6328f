"""Selection controller: selection state plus the option list it ranges over."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable

from oc_core.accessors import DisabledPredicate, OptionAccessor, ValueGetter
from oc_core.config import CheckerConfig
from oc_core.models import CheckerMode, SelectionChange, SelectionSnapshot
from oc_core.modes import build_selection_state

logger = logging.getLogger(__name__)

SelectionListener = Callable[[SelectionChange], None]


class SelectionController:
    """Track which options are selected under radio or checkbox rules.

    Constraint violations (min floor, max cap, disabled options) are rejected
    silently: the call returns False and the state is left untouched. Derived
    views are computed from the current state on every read.
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        *,
        get_value: ValueGetter | None = None,
        is_disabled: DisabledPredicate | None = None,
    ) -> None:
        self._config = config or CheckerConfig()
        self._accessor = OptionAccessor(
            self._config.value_field,
            self._config.disabled_field,
            get_value=get_value,
            is_disabled=is_disabled,
        )
        self._state = build_selection_state(self._config.mode, self._config.min)
        self._options: list[Any] = []
        self._lock = threading.RLock()
        self._listeners: list[SelectionListener] = []

    @classmethod
    def from_config(cls, config: CheckerConfig, **accessors: Any) -> "SelectionController":
        return cls(config, **accessors)

    @property
    def config(self) -> CheckerConfig:
        return self._config

    @property
    def mode(self) -> CheckerMode:
        return self._config.mode

    @property
    def accessor(self) -> OptionAccessor:
        return self._accessor

    @property
    def selection(self) -> Any:
        """Selected value (radio) or a copy of the selected values (checkbox)."""
        with self._lock:
            return self._state.current

    @property
    def options(self) -> list[Any]:
        with self._lock:
            return list(self._options)

    @property
    def enabled_options(self) -> list[Any]:
        with self._lock:
            return [opt for opt in self._options if not self._accessor.is_disabled(opt)]

    @property
    def effective_max(self) -> int:
        """Explicit ``max`` or, when unset, the number of enabled options."""
        if self.mode is CheckerMode.SINGLE:
            return 1
        with self._lock:
            return self._config.max or len(self.enabled_options)

    @property
    def all_active(self) -> bool:
        with self._lock:
            return self._state.all_active(len(self.enabled_options))

    @property
    def is_full(self) -> bool:
        with self._lock:
            return self._state.is_full(self.effective_max)

    def is_active(self, value: Any) -> bool:
        with self._lock:
            return self._state.contains(value)

    def snapshot(self) -> SelectionSnapshot:
        with self._lock:
            return SelectionSnapshot(
                mode=self.mode,
                selection=self._state.current,
                enabled_values=[
                    self._accessor.value_of(opt) for opt in self.enabled_options
                ],
                effective_max=self.effective_max,
                all_active=self.all_active,
                is_full=self.is_full,
            )

    def get_selection(self) -> Any:
        return self.selection

    def get_options(self) -> list[Any]:
        return self.options

    def get_enabled_options(self) -> list[Any]:
        return self.enabled_options

    def is_all_active(self) -> bool:
        return self.all_active

    def set_options(self, options: Iterable[Any]) -> None:
        """Replace the option list wholesale."""
        with self._lock:
            self._options = list(options)
            previous = self._state.current
            pruned = False
            if self._config.prune_stale:
                pruned = self._state.prune(
                    self._accessor.value_of(opt) for opt in self._options
                )
            current = self._state.current
            logger.debug("Option list replaced with %d entries", len(self._options))
        if pruned:
            self._notify(SelectionChange("set_options", None, previous, current))

    def check(self, option: Any) -> bool:
        """Toggle ``option`` (a record or a bare value) in the selection.

        Returns True when the selection changed.
        """
        with self._lock:
            value, disabled = self._resolve(option)
            if disabled:
                logger.debug("Check of disabled option %r ignored", value)
                return False
            previous = self._state.current
            changed = self._state.toggle(value, self.effective_max)
            current = self._state.current
        if changed:
            self._notify(SelectionChange("check", value, previous, current))
        return changed

    def check_all(self) -> bool:
        """Select every enabled option, or clear when all are already selected."""
        with self._lock:
            enabled_values = [
                self._accessor.value_of(opt) for opt in self.enabled_options
            ]
            previous = self._state.current
            changed = self._state.toggle_all(enabled_values)
            current = self._state.current
        if changed:
            self._notify(SelectionChange("check_all", None, previous, current))
        return changed

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register ``listener`` for selection changes; return an unsubscribe hook."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, change: SelectionChange) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.exception("Selection listener failed for %s", change.action)

    def _resolve(self, option: Any) -> tuple[Any, bool]:
        # A known option value is taken as-is, even when it has a `value`
        # attribute of its own (Enum members).
        for candidate in self._options:
            if self._accessor.value_of(candidate) == option:
                return option, self._accessor.is_disabled(candidate)
        if self._accessor.is_record(option):
            return self._accessor.value_of(option), self._accessor.is_disabled(option)
        return option, False
