"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError

from schemas.requests import FormatOptions
from schemas.responses import FormatResult


def load_options_payload(
    options: str | None,
    options_file: Path | None,
    set_values: list[str] | None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {}

    if options:
        _deep_update(payload, _parse_json_string(options))

    if options_file:
        _deep_update(payload, _load_options_file(options_file))

    if set_values:
        _deep_update(payload, _parse_set_values(set_values))

    return payload


def build_options(payload: dict[str, Any]) -> FormatOptions:
    try:
        return FormatOptions.model_validate(payload)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def parse_value(value: str) -> Any:
    if value == "":
        return ""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def json_dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def emit_json(data: Any) -> None:
    typer.echo(json_dumps(data))


def summarize_result(result: FormatResult) -> dict[str, Any]:
    """JSON-friendly view of a run; the document bytes are left out."""
    return {
        "filename": result.filename,
        "runtime_ms": result.runtime_ms,
        "report": result.report.model_dump(),
        "warnings": list(result.warnings),
    }


def _parse_json_string(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("Options must be a JSON object.")
    return data


def _load_options_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise typer.BadParameter(f"Options file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = _parse_json_string(text)
    if not isinstance(data, dict):
        raise typer.BadParameter("Options file must contain a JSON/YAML object.")
    return data


def _parse_set_values(items: list[str]) -> dict[str, Any]:
    parsed: dict[str, Any] = {}
    for item in items:
        if "=" not in item:
            raise typer.BadParameter("--set requires key=value syntax.")
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("--set requires a non-empty key.")
        _assign_dotted(parsed, key, parse_value(raw_value.strip()))
    return parsed


def _assign_dotted(target: dict[str, Any], key: str, value: Any) -> None:
    # "margins.left=1800" updates one nested field
    head, _, rest = key.partition(".")
    if not rest:
        target[head] = value
        return
    nested = target.setdefault(head, {})
    if not isinstance(nested, dict):
        raise typer.BadParameter(f"--set cannot nest under non-object key: {head}")
    _assign_dotted(nested, rest, value)


def _deep_update(target: dict[str, Any], updates: dict[str, Any]) -> None:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _deep_update(current, value)
        else:
            target[key] = value
