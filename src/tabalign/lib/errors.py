"""Error taxonomy for the alignment engine."""

from __future__ import annotations


class TabalignError(Exception):
    """Base class for all tabalign errors."""


class FormatSyntaxError(TabalignError, ValueError):
    """Format specifier does not match the `[lcr][0-9]+` grammar at some offset."""

    def __init__(self, spec: str, offset: int, expected: str = "[lcr][0-9]+") -> None:
        self.spec = spec
        self.offset = offset
        self.expected = expected
        super().__init__(f"Invalid format item at position {offset}, expected {expected}")


class PatternSyntaxError(TabalignError, ValueError):
    """Delimiter is not a valid regular expression."""

    def __init__(self, pattern: str, message: str, position: int | None = None) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(f"Invalid delimiter pattern {pattern!r}: {message}")


class ConfigurationInvariantViolation(TabalignError, RuntimeError):
    """An unknown alignment reached the renderer.

    The format parser is the only producer of alignment values, so this is a
    programming error rather than bad user input.
    """
