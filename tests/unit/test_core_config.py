"""Unit tests for the core configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


def test_settings_defaults():
    """Test that Settings initializes with expected defaults."""
    settings = Settings()

    assert settings.min_inflate_ratio == 0.001
    assert settings.inflate_grace_bytes == 100 * 1024
    assert settings.font_family == "Times New Roman"
    assert settings.output_filename == "Formatted_Project.docx"
    assert settings.cors_allow_origins == []
    assert settings.log_level == "INFO"


def test_settings_with_env_vars(monkeypatch):
    """Test that Settings properly loads values from environment variables."""
    monkeypatch.setenv("MIN_INFLATE_RATIO", "0.01")
    monkeypatch.setenv("FORMAT_FONT_FAMILY", "Cambria")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://example.org"]')

    settings = Settings()

    assert settings.min_inflate_ratio == 0.01
    assert settings.font_family == "Cambria"
    assert settings.cors_allow_origins == ["https://example.org"]


def test_settings_validation(monkeypatch):
    """A non-positive inflate ratio would disable the archive guard."""
    monkeypatch.setenv("MIN_INFLATE_RATIO", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_singleton():
    """Test that get_settings returns the same instance each time."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_settings_extra_field_handling():
    """Test that settings ignores extra fields."""
    with patch.dict(os.environ, {"UNKNOWN_FIELD": "value"}):
        settings = Settings()

    assert hasattr(settings, "font_family")
