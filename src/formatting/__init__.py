"""Structural reformatting of WordprocessingML documents."""

from .pipeline import format_document
from .styling import ParagraphRole, ScanState, classify

__all__ = ["ParagraphRole", "ScanState", "classify", "format_document"]
