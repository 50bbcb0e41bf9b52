"""Paragraph classification and restyling.

The engine walks the body paragraphs once, starting at the first structural
heading. A small state machine carries the only context a paragraph needs
from its neighbours: whether the previous non-blank paragraph was a
``CHAPTER`` line, in which case the next one is the chapter's title.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.text.run import Run

from formatting.keywords import (
    is_chapter_text,
    is_heading_text,
    is_major_section_text,
    is_sub_heading_text,
)

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.text.paragraph import Paragraph

logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "Times New Roman"
DEFAULT_LINE_SPACING = 2.0
HEADING_FONT_SIZE = 14
BODY_FONT_SIZE = 12
TOP_LEVEL_HEADING_STYLE = "Heading 1"
SUB_HEADING_STYLE = "Heading 2"


class ScanState(str, Enum):
    SCANNING = "scanning"
    EXPECTING_CHAPTER_TITLE = "expecting_chapter_title"


class ParagraphRole(str, Enum):
    BLANK = "blank"
    CHAPTER = "chapter"
    MAJOR_SECTION = "major_section"
    CHAPTER_TITLE = "chapter_title"
    SUB_HEADING = "sub_heading"
    BODY = "body"


@dataclass(frozen=True)
class ParagraphLook:
    alignment: WD_ALIGN_PARAGRAPH
    style: str | None
    page_break_before: bool
    bold: bool
    font_size: int


ROLE_LOOKS: dict[ParagraphRole, ParagraphLook] = {
    ParagraphRole.CHAPTER: ParagraphLook(
        WD_ALIGN_PARAGRAPH.CENTER, TOP_LEVEL_HEADING_STYLE, True, True, HEADING_FONT_SIZE
    ),
    ParagraphRole.MAJOR_SECTION: ParagraphLook(
        WD_ALIGN_PARAGRAPH.CENTER, TOP_LEVEL_HEADING_STYLE, True, True, HEADING_FONT_SIZE
    ),
    ParagraphRole.CHAPTER_TITLE: ParagraphLook(
        WD_ALIGN_PARAGRAPH.CENTER, TOP_LEVEL_HEADING_STYLE, False, True, HEADING_FONT_SIZE
    ),
    ParagraphRole.SUB_HEADING: ParagraphLook(
        WD_ALIGN_PARAGRAPH.JUSTIFY, SUB_HEADING_STYLE, False, True, BODY_FONT_SIZE
    ),
    # Body paragraphs keep whatever style they already had.
    ParagraphRole.BODY: ParagraphLook(
        WD_ALIGN_PARAGRAPH.JUSTIFY, None, False, False, BODY_FONT_SIZE
    ),
}

PAGE_STARTING_ROLES = frozenset({ParagraphRole.CHAPTER, ParagraphRole.MAJOR_SECTION})


@dataclass
class StylingSummary:
    start_index: int = 0
    roles: Counter = field(default_factory=Counter)

    def as_dict(self) -> dict[str, int]:
        payload = {"start_index": self.start_index}
        payload.update({role.value: self.roles.get(role, 0) for role in ParagraphRole})
        return payload


def classify(text: str | None, state: ScanState) -> ParagraphRole:
    """Assign a role from the paragraph text and the current scan state."""
    if not (text or "").strip():
        return ParagraphRole.BLANK
    if is_chapter_text(text):
        return ParagraphRole.CHAPTER
    if is_major_section_text(text):
        return ParagraphRole.MAJOR_SECTION
    if state is ScanState.EXPECTING_CHAPTER_TITLE:
        return ParagraphRole.CHAPTER_TITLE
    if is_sub_heading_text(text):
        return ParagraphRole.SUB_HEADING
    return ParagraphRole.BODY


def next_state(role: ParagraphRole) -> ScanState:
    if role is ParagraphRole.CHAPTER:
        return ScanState.EXPECTING_CHAPTER_TITLE
    return ScanState.SCANNING


def find_start_index(texts: Sequence[str]) -> int:
    for index, text in enumerate(texts):
        if is_heading_text(text):
            return index
    return 0


def classify_all(texts: Sequence[str]) -> list[ParagraphRole]:
    """Run the state machine over plain texts, from the start index onward."""
    state = ScanState.SCANNING
    roles: list[ParagraphRole] = []
    for text in texts[find_start_index(texts):]:
        role = classify(text, state)
        state = next_state(role)
        roles.append(role)
    return roles


def style_paragraphs(
    document: "DocxDocument",
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    line_spacing: float = DEFAULT_LINE_SPACING,
) -> StylingSummary:
    """Classify every paragraph from the first heading on and restyle it."""
    paragraphs = document.paragraphs
    start = find_start_index([paragraph.text for paragraph in paragraphs])
    summary = StylingSummary(start_index=start)
    state = ScanState.SCANNING

    for index in range(start, len(paragraphs)):
        paragraph = paragraphs[index]
        paragraph.paragraph_format.line_spacing = line_spacing

        role = classify(paragraph.text, state)
        state = next_state(role)
        summary.roles[role] += 1
        if role is ParagraphRole.BLANK:
            continue

        if role in PAGE_STARTING_ROLES:
            strip_manual_breaks(paragraph)
            if index > 0:
                previous = paragraphs[index - 1]
                strip_manual_breaks(previous)
                previous.paragraph_format.page_break_before = False

        _apply_look(document, paragraph, ROLE_LOOKS[role], font_family)

    logger.debug("Styled paragraphs from index %d: %s", start, summary.as_dict())
    return summary


def strip_manual_breaks(paragraph: "Paragraph") -> int:
    """Remove every ``w:br`` from the paragraph's runs."""
    removed = 0
    for run in iter_runs(paragraph):
        for br in run._r.findall(qn("w:br")):
            run._r.remove(br)
            removed += 1
    return removed


def iter_runs(paragraph: "Paragraph") -> list[Run]:
    """Direct runs plus the runs nested in hyperlinks, in document order."""
    return [Run(r, paragraph) for r in paragraph._p.xpath("./w:r | ./w:hyperlink/w:r")]


def apply_font(paragraph: "Paragraph", *, bold: bool, size: int, family: str) -> None:
    for run in iter_runs(paragraph):
        run.font.name = family
        run.font.size = Pt(size)
        run.bold = bold


def _apply_look(
    document: "DocxDocument", paragraph: "Paragraph", look: ParagraphLook, font_family: str
) -> None:
    paragraph.alignment = look.alignment
    if look.style is not None:
        paragraph.style = ensure_paragraph_style(document, look.style)
    paragraph.paragraph_format.page_break_before = look.page_break_before
    apply_font(paragraph, bold=look.bold, size=look.font_size, family=font_family)


def ensure_paragraph_style(document: "DocxDocument", name: str):
    """Return the named paragraph style, adding it when the package lacks it."""
    styles = document.styles
    if name in styles:
        return styles[name]
    logger.debug("Adding missing paragraph style %r", name)
    return styles.add_style(name, WD_STYLE_TYPE.PARAGRAPH)


__all__ = [
    "ParagraphLook",
    "ParagraphRole",
    "ROLE_LOOKS",
    "ScanState",
    "StylingSummary",
    "apply_font",
    "classify",
    "classify_all",
    "ensure_paragraph_style",
    "find_start_index",
    "iter_runs",
    "next_state",
    "strip_manual_breaks",
    "style_paragraphs",
]
