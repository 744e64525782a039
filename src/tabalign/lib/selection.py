"""Line-range selection around a cursor and replacement splicing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tabalign.lib.split import line_matches

if TYPE_CHECKING:
    import re
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class LineRange:
    """Zero-based inclusive line range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid line range: {self.start}..{self.end}")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def slice(self, lines: Sequence[str]) -> list[str]:
        return list(lines[self.start : self.end + 1])


def whole_buffer(lines: Sequence[str]) -> LineRange | None:
    if not lines:
        return None
    return LineRange(0, len(lines) - 1)


def selection_range(lines: Sequence[str], start: int, end: int) -> LineRange:
    """Validate a 1-based inclusive selection and convert it to a `LineRange`."""

    if start < 1:
        raise ValueError(f"Selection start must be >= 1, got {start}.")
    if end < start:
        raise ValueError(f"Selection end ({end}) is before start ({start}).")
    if end > len(lines):
        raise ValueError(f"Selection end ({end}) is past the last line ({len(lines)}).")
    return LineRange(start - 1, end - 1)


def expand_range(lines: Sequence[str], cursor: int, pattern: re.Pattern[str]) -> LineRange:
    """Grow a range from the zero-based `cursor` line over neighbours matching `pattern`.

    The cursor line itself is always included, whether or not it matches.
    """

    if not 0 <= cursor < len(lines):
        raise ValueError(f"Cursor line {cursor + 1} is outside the buffer (1..{len(lines)}).")
    start = cursor
    end = cursor
    while start > 0 and line_matches(lines[start - 1], pattern):
        start -= 1
    while end < len(lines) - 1 and line_matches(lines[end + 1], pattern):
        end += 1
    return LineRange(start, end)


def apply_replacements(
    lines: Sequence[str],
    line_range: LineRange,
    replacements: Sequence[str],
) -> list[str]:
    """Return a copy of `lines` with `line_range` swapped for `replacements`."""

    if len(replacements) != len(line_range):
        raise ValueError(
            f"Expected {len(line_range)} replacement lines, got {len(replacements)}."
        )
    if line_range.end >= len(lines):
        raise ValueError(f"Line range ends past the buffer ({len(lines)} lines).")
    return [*lines[: line_range.start], *replacements, *lines[line_range.end + 1 :]]
