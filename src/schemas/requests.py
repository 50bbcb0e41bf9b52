"""External request schemas for formatting runs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DOCX_EXTENSION = ".docx"


class FormatInput(BaseModel):
    docx_path: str | None = None
    docx_bytes: bytes | None = None
    filename: str | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _validate_source(self) -> "FormatInput":
        if self.docx_path is not None and self.docx_bytes is not None:
            raise ValueError("Provide exactly one of docx_path or docx_bytes.")
        if self.docx_path is None and self.docx_bytes is None:
            raise ValueError("Provide exactly one of docx_path or docx_bytes.")
        if self.docx_bytes is not None and not self.docx_bytes:
            raise ValueError("File is empty.")
        name = self.filename or self.docx_path
        if name and not name.endswith(DOCX_EXTENSION):
            raise ValueError("Upload .docx only.")
        return self


class MarginOptions(BaseModel):
    """Page margins in twips (1/20 pt)."""

    left: int = Field(default=2160, ge=0)
    right: int = Field(default=1440, ge=0)
    top: int = Field(default=1440, ge=0)
    bottom: int = Field(default=1440, ge=0)

    model_config = ConfigDict(extra="forbid")


class FormatOptions(BaseModel):
    """Per-run overrides. Unset fields fall back to settings or built-in defaults."""

    font_family: str | None = None
    line_spacing: float | None = Field(default=None, gt=0)
    margins: MarginOptions = Field(default_factory=MarginOptions)
    page_numbers: bool = True

    model_config = ConfigDict(extra="forbid")

    @field_validator("font_family")
    @classmethod
    def _strip_font_family(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


__all__ = ["DOCX_EXTENSION", "FormatInput", "FormatOptions", "MarginOptions"]
