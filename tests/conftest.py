# tests/conftest.py
from __future__ import annotations

import io
from typing import Callable, Sequence

import pytest
from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached; env overrides in one test must not leak into the next.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def build_document(texts: Sequence[str]):
    """Blank python-docx document with one single-run paragraph per text."""
    document = Document()
    for text in texts:
        paragraph = document.add_paragraph()
        if text:
            paragraph.add_run(text)
    return document


def add_page_break_run(paragraph) -> None:
    run = paragraph.add_run()
    br = OxmlElement("w:br")
    br.set(qn("w:type"), "page")
    run._r.append(br)


def embed_section_break(paragraph):
    """Give ``paragraph`` its own w:sectPr, turning it into a section break."""
    pPr = paragraph._p.get_or_add_pPr()
    sectPr = OxmlElement("w:sectPr")
    pPr.append(sectPr)
    return sectPr


def to_bytes(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def texts_of(document) -> list[str]:
    return [paragraph.text for paragraph in document.paragraphs]


@pytest.fixture
def make_document() -> Callable[[Sequence[str]], object]:
    return build_document


@pytest.fixture
def docx_bytes() -> bytes:
    return to_bytes(
        build_document(
            ["", "CHAPTER 1", "Overview", "", "1.1 Background", "This is body text.", "2008 was a year."]
        )
    )
