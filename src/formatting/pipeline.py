"""Orchestration of the reformatting stages over one document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from formatting.ghost_lines import prune_ghost_lines
from formatting.page_numbers import inject_page_numbers
from formatting.sections import (
    PageMargins,
    apply_margins,
    clear_footer_parts,
    reset_section_references,
)
from formatting.styling import DEFAULT_FONT_FAMILY, DEFAULT_LINE_SPACING, style_paragraphs
from schemas.requests import FormatOptions
from schemas.responses import FormatReport

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument

logger = logging.getLogger(__name__)


def format_document(
    document: "DocxDocument",
    options: FormatOptions | None = None,
    *,
    font_family: str | None = None,
) -> FormatReport:
    """Reformat ``document`` in place.

    Stages run in a fixed order: section reset, ghost-line pruning, margins,
    classification and styling, page numbers. Any failure propagates and
    leaves the document half-done; callers must discard it.
    """
    options = options or FormatOptions()
    report = FormatReport()

    report.section_reset = reset_section_references(document)
    report.footers_cleared = clear_footer_parts(document)

    report.ghost_lines_removed = prune_ghost_lines(document)

    apply_margins(document, PageMargins(**options.margins.model_dump()))

    summary = style_paragraphs(
        document,
        font_family=options.font_family or font_family or DEFAULT_FONT_FAMILY,
        line_spacing=options.line_spacing or DEFAULT_LINE_SPACING,
    )
    report.start_index = summary.start_index
    report.roles = {
        key: value for key, value in summary.as_dict().items() if key != "start_index"
    }

    if options.page_numbers:
        report.sections_linked = inject_page_numbers(document)

    logger.info(
        "Formatted document: %d ghost line(s) removed, %d heading(s), %d section(s) linked",
        report.ghost_lines_removed,
        report.roles.get("chapter", 0) + report.roles.get("major_section", 0),
        report.sections_linked,
    )
    return report


__all__ = ["format_document"]
