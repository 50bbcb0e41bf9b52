"""Text heuristics shared by the ghost-line pruner and the styling engine."""

from __future__ import annotations

import re

CHAPTER_KEYWORD = "CHAPTER"
MAJOR_SECTION_KEYWORDS = ("DEDICATION", "ACKNOWLEDGEMENT", "ABSTRACT", "REFERENCES")
HEADING_KEYWORDS = (CHAPTER_KEYWORD, *MAJOR_SECTION_KEYWORDS)

# Requires a dot between two digit groups, so "2008" or "1999 Results" stay body text.
_SUB_HEADING_PATTERN = re.compile(r"[0-9]+\.[0-9]+.*", re.DOTALL)


def normalize_text(text: str | None) -> str:
    """Return the trimmed, uppercased form used for classification."""
    return (text or "").strip().upper()


def is_heading_text(text: str | None) -> bool:
    normalized = normalize_text(text)
    return normalized.startswith(HEADING_KEYWORDS)


def is_chapter_text(text: str | None) -> bool:
    return normalize_text(text).startswith(CHAPTER_KEYWORD)


def is_major_section_text(text: str | None) -> bool:
    return normalize_text(text).startswith(MAJOR_SECTION_KEYWORDS)


def is_sub_heading_text(text: str | None) -> bool:
    return _SUB_HEADING_PATTERN.fullmatch((text or "").strip()) is not None


__all__ = [
    "CHAPTER_KEYWORD",
    "HEADING_KEYWORDS",
    "MAJOR_SECTION_KEYWORDS",
    "is_chapter_text",
    "is_heading_text",
    "is_major_section_text",
    "is_sub_heading_text",
    "normalize_text",
]
