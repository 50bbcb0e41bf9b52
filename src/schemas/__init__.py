"""Schema package for external contracts."""

from .requests import FormatInput, FormatOptions, MarginOptions
from .responses import FormatReport, FormatResult

__all__ = ["FormatInput", "FormatOptions", "FormatReport", "FormatResult", "MarginOptions"]
