"""Turn controller state into tables and render them with rich."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from oc_core.api import SelectionController
from oc_ui.models import TableModel
from oc_ui.script import ReplayStep

_LEVEL_TEMPLATES = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def _fmt(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, list):
        return "[" + ", ".join(_fmt(item) for item in value) + "]"
    return str(value)


def _label(option: Any) -> str:
    if isinstance(option, Mapping):
        return str(option.get("label", ""))
    return str(getattr(option, "label", ""))


def build_options_table(controller: SelectionController) -> TableModel:
    """One row per option with its disabled and active markers."""
    accessor = controller.accessor
    rows = []
    for option in controller.options:
        value = accessor.value_of(option)
        rows.append(
            [
                _fmt(value),
                _label(option),
                "yes" if accessor.is_disabled(option) else "",
                "✓" if controller.is_active(value) else "",
            ]
        )
    return TableModel(
        title=f"Options ({controller.mode.value})",
        columns=["Value", "Label", "Disabled", "Active"],
        rows=rows,
    )


def build_steps_table(steps: Iterable[ReplayStep]) -> TableModel:
    rows = [
        [
            str(step.index),
            step.action,
            _fmt(step.value),
            "✓" if step.changed else "no-op",
            _fmt(step.selection),
        ]
        for step in steps
    ]
    return TableModel(
        title="Replay",
        columns=["#", "Action", "Value", "Changed", "Selection"],
        rows=rows,
    )


class RichReporter:
    """Print TableModels and status lines to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show(self, table: TableModel) -> None:
        rich_table = Table(title=table.title, show_lines=True, header_style="bold cyan")
        for column in table.columns:
            rich_table.add_column(column)
        for row in table.rows:
            rich_table.add_row(*(Text(cell) for cell in row))
        self._console.print(rich_table)

    def emit(self, level: str, message: str) -> None:
        template = _LEVEL_TEMPLATES.get(level, "{message}")
        self._console.print(template.format(message=escape(message)))

    def summary(self, controller: SelectionController) -> None:
        snapshot = controller.snapshot()
        self.emit(
            "success",
            f"Selection: {_fmt(snapshot.selection)} "
            f"({snapshot.count}/{snapshot.effective_max}, all_active={snapshot.all_active})",
        )
