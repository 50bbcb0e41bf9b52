"""Removal of blank paragraphs left above structural headings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from formatting.keywords import is_heading_text

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.text.paragraph import Paragraph

logger = logging.getLogger(__name__)


def find_ghost_lines(texts: Sequence[str]) -> list[int]:
    """Return indices of blank entries sitting directly above a heading.

    Headings are visited from the end of the document backwards, and each one
    collects the contiguous run of blank entries above it. The result is
    sorted in descending order so callers can delete without shifting the
    positions they have yet to visit.
    """
    doomed: set[int] = set()
    for index in range(len(texts) - 1, -1, -1):
        if not is_heading_text(texts[index]):
            continue
        cursor = index - 1
        while cursor >= 0 and not texts[cursor].strip():
            doomed.add(cursor)
            cursor -= 1
    return sorted(doomed, reverse=True)


def prune_ghost_lines(document: "DocxDocument") -> int:
    """Delete ghost lines from the document body and return how many went."""
    paragraphs = document.paragraphs
    doomed = find_ghost_lines([paragraph.text for paragraph in paragraphs])
    for index in doomed:
        _remove_paragraph(paragraphs[index])
    if doomed:
        logger.debug("Removed %d ghost line(s) above headings", len(doomed))
    return len(doomed)


def _remove_paragraph(paragraph: "Paragraph") -> None:
    element = paragraph._p
    parent = element.getparent()
    if parent is not None:
        parent.remove(element)


__all__ = ["find_ghost_lines", "prune_ghost_lines"]
