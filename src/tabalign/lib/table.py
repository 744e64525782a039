"""Table building and column alignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

import structlog

from tabalign.lib.errors import ConfigurationInvariantViolation
from tabalign.lib.formats import Alignment, FormatItem
from tabalign.lib.indent import detect_common_indentation
from tabalign.lib.split import DelimiterPattern, compile_pattern, split_row

if TYPE_CHECKING:
    import re
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

Row: TypeAlias = tuple[str, ...]


def pad_cell(text: str, width: int, alignment: Alignment) -> str:
    """Pad `text` to `width` according to `alignment`.

    Center alignment puts the odd space on the right:

    >>> pad_cell("x", 4, Alignment.CENTER)
    ' x  '
    """

    match alignment:
        case Alignment.LEFT:
            return text.ljust(width)
        case Alignment.RIGHT:
            return text.rjust(width)
        case Alignment.CENTER:
            deficit = max(width - len(text), 0)
            left = deficit // 2
            return " " * left + text + " " * (deficit - left)
        case _:
            raise ConfigurationInvariantViolation(f"Invalid alignment: {alignment!r}")


@dataclass(frozen=True, slots=True)
class Table:
    """Split lines plus the indentation shared by all of them.

    Rows keep their own length; a row with fewer delimiters simply has fewer
    cells. Cells sit at even token indices, delimiters at odd ones.
    """

    rows: tuple[Row, ...]
    indentation: str = ""

    @classmethod
    def build(cls, lines: Sequence[str], pattern: re.Pattern[str]) -> Table:
        return cls(
            rows=tuple(split_row(line, pattern) for line in lines),
            indentation=detect_common_indentation(lines),
        )

    @property
    def column_count(self) -> int:
        widest = max((len(row) for row in self.rows), default=0)
        return (widest + 1) // 2

    def column_widths(self) -> list[int]:
        widths = [0] * self.column_count
        for row in self.rows:
            for column, cell in enumerate(row[::2]):
                widths[column] = max(widths[column], len(cell))
        return widths

    def render(self, formats: Sequence[FormatItem]) -> list[str]:
        if not formats:
            raise ValueError("At least one format item is required.")
        widths = self.column_widths()
        return [self.indentation + _render_row(row, widths, formats) for row in self.rows]


def _render_row(row: Row, widths: Sequence[int], formats: Sequence[FormatItem]) -> str:
    pieces: list[str] = []
    for column, token_index in enumerate(range(0, len(row), 2)):
        fmt = formats[column % len(formats)]
        pieces.append(pad_cell(row[token_index], widths[column], fmt.alignment))
        if token_index < len(row) - 1:
            pieces.append(" " * fmt.pad)
            pieces.append(row[token_index + 1])
    return "".join(pieces)


def align_lines(
    lines: Sequence[str],
    pattern: DelimiterPattern,
    formats: Sequence[FormatItem],
) -> list[str]:
    """Align `lines` into columns split on `pattern`.

    Returns one replacement per input line. Pattern and format problems are
    raised before any line is rendered.
    """

    if not formats:
        raise ValueError("At least one format item is required.")
    compiled = compile_pattern(pattern)
    table = Table.build(lines, compiled)
    rendered = table.render(formats)
    logger.debug(
        "table.aligned",
        rows=len(table.rows),
        columns=table.column_count,
        indentation=len(table.indentation),
    )
    return rendered
