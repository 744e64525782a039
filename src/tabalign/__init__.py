"""Align delimiter-separated text into columns."""

from tabalign.lib.errors import (
    ConfigurationInvariantViolation,
    FormatSyntaxError,
    PatternSyntaxError,
    TabalignError,
)
from tabalign.lib.formats import Alignment, FormatItem, parse_format_spec, resolve_formats
from tabalign.lib.indent import detect_common_indentation
from tabalign.lib.split import split_with_delimiters
from tabalign.lib.table import align_lines

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "ConfigurationInvariantViolation",
    "FormatItem",
    "FormatSyntaxError",
    "PatternSyntaxError",
    "TabalignError",
    "__version__",
    "align_lines",
    "detect_common_indentation",
    "parse_format_spec",
    "resolve_formats",
    "split_with_delimiters",
]
