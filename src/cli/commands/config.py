"""Configuration inspection commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from core.config import Settings, get_settings
from schemas.requests import FormatOptions
from cli.common import emit_json, json_dumps


app = typer.Typer(
    help="Inspect and export configuration",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("show", help="Show the effective configuration")
def show_config(
    json_out: bool = typer.Option(True, "--json/--no-json", help="Print JSON"),
) -> None:
    settings = get_settings()
    payload = settings.model_dump()
    if json_out:
        emit_json(payload)
        return
    for key, value in payload.items():
        typer.echo(f"{key}={value}")


@app.command("export", help="Export the configuration as JSON")
def export_config(
    output: Path | None = typer.Option(
        None,
        "--output",
        help="Target JSON file (defaults to stdout)",
    ),
) -> None:
    payload = get_settings().model_dump()
    if output is None:
        emit_json(payload)
        return
    output.write_text(json_dumps(payload), encoding="utf-8")
    typer.echo(f"Wrote: {output}")


@app.command("diff", help="Show values that differ from the defaults")
def diff_config() -> None:
    settings = get_settings()
    defaults = _settings_defaults()
    current = settings.model_dump()
    diff: dict[str, dict[str, Any]] = {}
    for key, value in current.items():
        default = defaults.get(key)
        if value != default:
            diff[key] = {"value": value, "default": default}
    emit_json(diff)


@app.command("options", help="Show the per-run options schema")
def list_run_options() -> None:
    emit_json(FormatOptions.model_json_schema())


def _settings_defaults() -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    for name, field in Settings.model_fields.items():
        defaults[name] = field.get_default(call_default_factory=True)
    return defaults


__all__ = ["app"]
