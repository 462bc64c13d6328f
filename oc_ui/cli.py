"""
Command-line interface for option-checker-lib.

Replays scripted check/check_all interactions against a selection controller
so constraint behavior can be inspected without a host UI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from oc_common.api import OCError, configure_logging, error_to_payload
from oc_core.api import load_checker_config
from oc_ui.presenters import RichReporter, build_options_table, build_steps_table
from oc_ui.script import load_script, replay

reporter = RichReporter()

app = typer.Typer(help="Inspect selection-controller behavior.", no_args_is_help=True)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Configure logging for every command."""
    configure_logging(debug=debug, force=True)


@app.command("replay")
def replay_command(
    script: Path = typer.Argument(..., help="YAML script with checker, options and actions."),
    as_json: bool = typer.Option(False, "--json", help="Print the final snapshot as JSON."),
) -> None:
    """Apply a scripted sequence of checks and show the resulting selection."""
    try:
        result = replay(load_script(script))
    except (OCError, FileNotFoundError) as exc:
        _fail(exc, as_json)

    snapshot = result.controller.snapshot()
    if as_json:
        typer.echo(json.dumps(snapshot.to_dict(), default=str))
        return

    reporter.show(build_steps_table(result.steps))
    reporter.show(build_options_table(result.controller))
    reporter.summary(result.controller)


@app.command("validate")
def validate_command(
    config: Path = typer.Argument(..., help="YAML file holding checker settings."),
) -> None:
    """Validate checker settings without replaying anything."""
    try:
        cfg = load_checker_config(config)
    except (OCError, FileNotFoundError) as exc:
        _fail(exc, as_json=False)
    reporter.emit("success", f"Valid {cfg.mode.name} checker: min={cfg.min} max={cfg.max}")


def _fail(exc: Exception, as_json: bool) -> NoReturn:
    if as_json and isinstance(exc, OCError):
        typer.echo(json.dumps(error_to_payload(exc)))
    else:
        reporter.emit("error", str(exc))
    raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
