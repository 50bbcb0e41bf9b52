"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    min_inflate_ratio: float = Field(
        default=0.001, gt=0, validation_alias="MIN_INFLATE_RATIO"
    )
    inflate_grace_bytes: int = Field(
        default=100 * 1024, ge=0, validation_alias="INFLATE_GRACE_BYTES"
    )

    font_family: str = Field(
        default="Times New Roman", validation_alias="FORMAT_FONT_FAMILY"
    )
    output_filename: str = Field(
        default="Formatted_Project.docx", validation_alias="FORMAT_OUTPUT_FILENAME"
    )

    cors_allow_origins: list[str] = Field(
        default_factory=list, validation_alias="CORS_ALLOW_ORIGINS"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["Settings", "get_settings"]
