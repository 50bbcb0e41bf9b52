"""Core formatting service for CLI/API reuse."""

from __future__ import annotations

import logging
from pathlib import Path
from time import perf_counter
from typing import Any, Mapping

from core.config import get_settings
from formatting.pipeline import format_document
from schemas.requests import FormatInput, FormatOptions
from schemas.responses import FormatResult
from services.io import check_archive, load_document, save_document

logger = logging.getLogger(__name__)


def run_formatter(
    input_data: FormatInput | Mapping[str, Any],
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> FormatResult:
    """Guard, load, reformat and serialize one document."""
    input_obj = input_data if isinstance(input_data, FormatInput) else FormatInput.model_validate(input_data)
    options_obj = options if isinstance(options, FormatOptions) else FormatOptions.model_validate(options or {})
    settings = get_settings()

    start = perf_counter()
    if input_obj.docx_bytes is not None:
        data = input_obj.docx_bytes
        source = input_obj.filename or "<upload>"
    else:
        path = Path(str(input_obj.docx_path))
        data = path.read_bytes()
        source = path.name
        if not data:
            raise ValueError("File is empty.")

    check_archive(
        data,
        min_inflate_ratio=settings.min_inflate_ratio,
        grace_bytes=settings.inflate_grace_bytes,
    )
    document = load_document(data)
    report = format_document(document, options_obj, font_family=settings.font_family)
    content = save_document(document)

    runtime_ms = int((perf_counter() - start) * 1000)
    logger.info("Formatted %s in %d ms", source, runtime_ms)

    warnings: list[str] = []
    if report.start_index == 0 and not report.roles.get("chapter") and not report.roles.get("major_section"):
        warnings.append("No structural heading found; styling started at the first paragraph.")

    return FormatResult(
        content=content,
        filename=settings.output_filename,
        report=report,
        runtime_ms=runtime_ms,
        warnings=warnings,
    )


__all__ = ["run_formatter"]
