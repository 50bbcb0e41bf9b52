"""Page-number footer construction and section linkage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docx.enum.section import WD_HEADER_FOOTER
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.text.paragraph import Paragraph

from formatting.sections import all_sections

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.oxml.section import CT_SectPr
    from docx.parts.hdrftr import FooterPart
    from docx.text.run import Run

logger = logging.getLogger(__name__)

PAGE_FIELD_INSTRUCTION = "PAGE"
PAGE_FIELD_FALLBACK = "1"


def build_page_number_field(paragraph: Paragraph) -> list["Run"]:
    """Append a PAGE field to ``paragraph`` as five sibling runs.

    Order is begin, instruction, separate, cached result, end. Consumers that
    do not evaluate fields show the cached result.
    """
    return [
        _add_field_char(paragraph, "begin"),
        _add_instruction(paragraph, PAGE_FIELD_INSTRUCTION),
        _add_field_char(paragraph, "separate"),
        paragraph.add_run(PAGE_FIELD_FALLBACK),
        _add_field_char(paragraph, "end"),
    ]


def create_page_number_footer(document: "DocxDocument") -> tuple["FooterPart", str]:
    """Create a new footer part holding one centered page-number paragraph."""
    footer_part, rId = document.part.add_footer_part()
    footer = footer_part.element
    for child in list(footer):
        footer.remove(child)

    paragraph = Paragraph(footer.add_p(), footer_part)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    build_page_number_field(paragraph)
    return footer_part, rId


def link_footer(sectPr: "CT_SectPr", rId: str) -> None:
    """Bind ``rId`` as the only footer of the section."""
    sectPr.titlePg_val = False
    for reference in sectPr.footerReference_lst:
        sectPr.remove(reference)
    sectPr.add_footerReference(WD_HEADER_FOOTER.PRIMARY, rId)


def inject_page_numbers(document: "DocxDocument") -> int:
    """Attach one shared page-number footer to every section block."""
    _, rId = create_page_number_footer(document)
    sections = all_sections(document)
    if not sections:
        sections = [document.element.body.get_or_add_sectPr()]
    for sectPr in sections:
        link_footer(sectPr, rId)
    logger.debug("Linked page-number footer %s into %d section(s)", rId, len(sections))
    return len(sections)


def _add_field_char(paragraph: Paragraph, kind: str) -> "Run":
    run = paragraph.add_run()
    fld_char = OxmlElement("w:fldChar")
    fld_char.set(qn("w:fldCharType"), kind)
    run._r.append(fld_char)
    return run


def _add_instruction(paragraph: Paragraph, instruction: str) -> "Run":
    run = paragraph.add_run()
    instr_text = OxmlElement("w:instrText")
    instr_text.set(qn("xml:space"), "preserve")
    instr_text.text = instruction
    run._r.append(instr_text)
    return run


__all__ = [
    "PAGE_FIELD_FALLBACK",
    "PAGE_FIELD_INSTRUCTION",
    "build_page_number_field",
    "create_page_number_footer",
    "inject_page_numbers",
    "link_footer",
]
