"""Text formatting protocol for operation outputs.

Lives in the lib layer so operation outputs can implement it without
importing from the CLI package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Knobs passed to `format_text()` implementations."""

    verbosity: int = 0  # 0=normal, 1=verbose, -1=quiet


@runtime_checkable
class TextFormattable(Protocol):
    """Output dataclasses that know how to render themselves as plain text."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...


@runtime_checkable
class PorcelainFormattable(Protocol):
    """Outputs with their own stable, line-oriented machine format."""

    def porcelain_lines(self) -> list[str]: ...
