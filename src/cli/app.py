"""Typer CLI entrypoint for document formatting runs."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from docformat import __version__
from cli.commands import config as config_command

app = typer.Typer(
    help=(
        "Document formatter\n\nReformats .docx theses and reports: headings, "
        "spacing, page breaks, margins and page numbers.\n"
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)
app.add_typer(config_command.app, name="config")


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log every pipeline stage",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("format", help="Reformat a .docx file")
def format_file(
    docx_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="DOCX",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the result (default: <name>_formatted.docx next to the input)",
    ),
    options: str | None = typer.Option(
        None,
        "--options",
        help="FormatOptions as a JSON string",
    ),
    options_file: Path | None = typer.Option(
        None,
        "--options-file",
        help="JSON/YAML file holding FormatOptions",
    ),
    set_values: list[str] | None = typer.Option(
        None,
        "--set",
        help="Override one option as key=value (dotted keys for margins), repeatable",
    ),
    no_page_numbers: bool = typer.Option(
        False,
        "--no-page-numbers",
        help="Skip the page-number footer",
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Print the run report as JSON",
    ),
) -> None:
    from cli.common import build_options, emit_json, load_options_payload, summarize_result
    from schemas.requests import DOCX_EXTENSION, FormatInput
    from services.formatter import run_formatter

    if docx_path.suffix != DOCX_EXTENSION:
        typer.echo("Error: only .docx files are supported.", err=True)
        raise typer.Exit(code=1)

    payload = load_options_payload(options, options_file, set_values)
    if no_page_numbers:
        payload["page_numbers"] = False
    options_obj = build_options(payload)

    try:
        result = run_formatter(FormatInput(docx_path=str(docx_path)), options_obj)
    except Exception as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    target = output or docx_path.with_name(f"{docx_path.stem}_formatted{DOCX_EXTENSION}")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(result.content)

    if json_out:
        summary = summarize_result(result)
        summary["output"] = str(target)
        emit_json(summary)
        return

    report = result.report
    typer.echo(f"Wrote: {target}")
    typer.echo(f"  ghost lines removed: {report.ghost_lines_removed}")
    typer.echo(f"  styling started at paragraph: {report.start_index}")
    for role, count in report.roles.items():
        typer.echo(f"  {role}: {count}")
    typer.echo(f"  sections linked to page numbers: {report.sections_linked}")
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)


def main() -> None:
    app()


__all__ = ["app", "main"]
