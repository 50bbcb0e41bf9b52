"""Section-level cleanup: header/footer references, stale footers and margins."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.shared import Twips

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.oxml.section import CT_SectPr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMargins:
    """Page margins in twentieths of a point; the left side leaves room for binding."""

    left: int = 2160
    right: int = 1440
    top: int = 1440
    bottom: int = 1440


DEFAULT_MARGINS = PageMargins()


def body_sections(document: "DocxDocument") -> list["CT_SectPr"]:
    """Every ``w:sectPr`` sitting directly in the body."""
    return list(document.element.body.xpath("./w:sectPr"))


def all_sections(document: "DocxDocument") -> list["CT_SectPr"]:
    """Body-level section blocks followed by the ones embedded in paragraphs."""
    body = document.element.body
    return body_sections(document) + list(body.xpath("./w:p/w:pPr/w:sectPr"))


def clear_hdrftr_references(sectPr: "CT_SectPr") -> None:
    for reference in sectPr.footerReference_lst + sectPr.headerReference_lst:
        sectPr.remove(reference)


def reset_section_references(document: "DocxDocument") -> bool:
    """Drop header and footer bindings from the trailing body section, if any."""
    sectPr = document.element.body.sectPr
    if sectPr is None:
        return False
    clear_hdrftr_references(sectPr)
    return True


def clear_footer_parts(document: "DocxDocument") -> int:
    """Empty every footer part related from the main document part.

    A footer must hold at least one block, so a bare paragraph is left behind.
    """
    cleared = 0
    for rel in document.part.rels.values():
        if rel.is_external or rel.reltype != RT.FOOTER:
            continue
        footer = rel.target_part.element
        for child in list(footer):
            footer.remove(child)
        footer.add_p()
        cleared += 1
    if cleared:
        logger.debug("Emptied %d existing footer part(s)", cleared)
    return cleared


def apply_margins(
    document: "DocxDocument", margins: PageMargins = DEFAULT_MARGINS
) -> "CT_SectPr":
    """Append a new body section block carrying only the page margins.

    A section block already present is left where it is, so the body may end
    up with two of them.
    """
    sectPr = document.element.body._add_sectPr()
    sectPr.left_margin = Twips(margins.left)
    sectPr.right_margin = Twips(margins.right)
    sectPr.top_margin = Twips(margins.top)
    sectPr.bottom_margin = Twips(margins.bottom)
    return sectPr


__all__ = [
    "DEFAULT_MARGINS",
    "PageMargins",
    "all_sections",
    "apply_margins",
    "body_sections",
    "clear_footer_parts",
    "clear_hdrftr_references",
    "reset_section_references",
]
