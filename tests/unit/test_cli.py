from __future__ import annotations

import json
from pathlib import Path

from docx import Document
from docx.shared import Twips
from typer.testing import CliRunner

from cli.app import app

runner = CliRunner()


def test_format_writes_output(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "thesis.docx"
    source.write_bytes(docx_bytes)
    target = tmp_path / "out" / "formatted.docx"

    result = runner.invoke(app, ["format", str(source), "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert "ghost lines removed: 1" in result.stdout
    document = Document(str(target))
    assert document.paragraphs[0].text == "CHAPTER 1"


def test_format_default_output_and_json(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "thesis.docx"
    source.write_bytes(docx_bytes)

    result = runner.invoke(
        app,
        ["format", str(source), "--json", "--no-page-numbers", "--set", "margins.left=1800"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["output"] == str(tmp_path / "thesis_formatted.docx")
    assert payload["report"]["sections_linked"] == 0
    assert (tmp_path / "thesis_formatted.docx").exists()


def test_format_rejects_other_extensions(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("hello", encoding="utf-8")

    result = runner.invoke(app, ["format", str(source)])

    assert result.exit_code == 1


def test_format_reports_pipeline_failure(tmp_path: Path) -> None:
    source = tmp_path / "broken.docx"
    source.write_bytes(b"not a zip")

    result = runner.invoke(app, ["format", str(source)])

    assert result.exit_code == 1
    assert not (tmp_path / "broken_formatted.docx").exists()


def test_config_show_outputs_json() -> None:
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["font_family"] == "Times New Roman"


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip()


def test_format_reads_yaml_options_file(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "thesis.docx"
    source.write_bytes(docx_bytes)
    options_file = tmp_path / "options.yaml"
    options_file.write_text("font_family: Arial\nmargins:\n  left: 1800\n", encoding="utf-8")
    target = tmp_path / "formatted.docx"

    result = runner.invoke(
        app,
        ["format", str(source), "-o", str(target), "--options-file", str(options_file)],
    )

    assert result.exit_code == 0, result.output
    document = Document(str(target))
    assert document.sections[-1].left_margin == Twips(1800)
    assert document.sections[-1].right_margin == Twips(1440)
    assert document.paragraphs[0].runs[0].font.name == "Arial"


def test_format_merges_json_options_with_set(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "thesis.docx"
    source.write_bytes(docx_bytes)
    target = tmp_path / "formatted.docx"

    result = runner.invoke(
        app,
        [
            "format",
            str(source),
            "-o",
            str(target),
            "--options",
            '{"margins": {"left": 1800, "top": 720}}',
            "--set",
            "margins.left=2000",
        ],
    )

    assert result.exit_code == 0, result.output
    section = Document(str(target)).sections[-1]
    assert section.left_margin == Twips(2000)
    assert section.top_margin == Twips(720)


def test_format_rejects_invalid_options_json(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "thesis.docx"
    source.write_bytes(docx_bytes)

    result = runner.invoke(app, ["format", str(source), "--options", "{not json"])

    assert result.exit_code == 2
    assert not (tmp_path / "thesis_formatted.docx").exists()


def test_config_export_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"

    result = runner.invoke(app, ["config", "export", "--output", str(target)])

    assert result.exit_code == 0, result.output
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["output_filename"] == "Formatted_Project.docx"
    assert payload["min_inflate_ratio"] == 0.001


def test_config_diff_lists_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FORMAT_FONT_FAMILY", "Georgia")

    result = runner.invoke(app, ["config", "diff"])

    assert result.exit_code == 0, result.output
    diff = json.loads(result.stdout)
    assert diff["font_family"] == {"value": "Georgia", "default": "Times New Roman"}
    assert "output_filename" not in diff


def test_config_options_prints_schema() -> None:
    result = runner.invoke(app, ["config", "options"])

    assert result.exit_code == 0, result.output
    schema = json.loads(result.stdout)
    assert set(schema["properties"]) == {"font_family", "line_spacing", "margins", "page_numbers"}


def test_format_extension_check_is_case_sensitive(tmp_path: Path, docx_bytes: bytes) -> None:
    source = tmp_path / "THESIS.DOCX"
    source.write_bytes(docx_bytes)

    result = runner.invoke(app, ["format", str(source)])

    assert result.exit_code == 1
