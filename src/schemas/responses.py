"""External response schemas for formatting runs."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FormatReport(BaseModel):
    """What each pipeline stage did to one document."""

    section_reset: bool = False
    footers_cleared: int = 0
    ghost_lines_removed: int = 0
    start_index: int = 0
    roles: dict[str, int] = Field(default_factory=dict)
    sections_linked: int = 0

    model_config = ConfigDict(extra="forbid")


class FormatResult(BaseModel):
    content: bytes
    filename: str
    report: FormatReport
    runtime_ms: int | None = None
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


__all__ = ["FormatReport", "FormatResult"]
