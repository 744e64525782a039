"""align.run operation: tabularize a range of a text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from tabalign.lib.formats import resolve_formats
from tabalign.lib.ops.registry import OperationSpec, operation
from tabalign.lib.selection import (
    LineRange,
    apply_replacements,
    expand_range,
    selection_range,
    whole_buffer,
)
from tabalign.lib.split import compile_pattern
from tabalign.lib.table import align_lines

if TYPE_CHECKING:
    import re

    from tabalign.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AlignInput:
    """Buffer plus the delimiter/format and an optional 1-based range.

    `start`/`end` select an explicit range; `cursor` expands around one line
    over neighbours that contain the delimiter. With neither, the whole
    buffer is aligned.
    """

    lines: tuple[str, ...]
    delimiter: str | None = None
    format_spec: str = ""
    start: int | None = None
    end: int | None = None
    cursor: int | None = None


@dataclass(frozen=True, slots=True)
class AlignOutput:
    start: int
    end: int
    lines: tuple[str, ...]
    changed: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return "\n".join(self.lines)

    def porcelain_lines(self) -> list[str]:
        if not self.lines:
            return []
        return [
            f"{number}\t{self.lines[number - 1]}"
            for number in range(self.start, self.end + 1)
        ]


def _resolve_range(payload: AlignInput, pattern: re.Pattern[str]) -> LineRange | None:
    if payload.cursor is not None and (payload.start is not None or payload.end is not None):
        raise ValueError("Cannot combine --line with --start/--end.")
    if payload.cursor is not None:
        return expand_range(payload.lines, payload.cursor - 1, pattern)
    if payload.start is not None or payload.end is not None:
        start = payload.start if payload.start is not None else 1
        end = payload.end if payload.end is not None else len(payload.lines)
        return selection_range(payload.lines, start, end)
    return whole_buffer(payload.lines)


def align_run_sync(payload: AlignInput) -> AlignOutput:
    # Validate both inputs before touching any line.
    if not payload.delimiter:
        raise ValueError("Delimiter cannot be empty.")
    pattern = compile_pattern(payload.delimiter)
    formats = resolve_formats(payload.format_spec)

    line_range = _resolve_range(payload, pattern)
    if line_range is None:
        return AlignOutput(start=0, end=0, lines=(), changed=0)

    original = line_range.slice(payload.lines)
    replacements = align_lines(original, pattern, formats)
    updated = apply_replacements(payload.lines, line_range, replacements)
    changed = sum(
        1 for before, after in zip(original, replacements, strict=True) if before != after
    )
    logger.info(
        "align.completed",
        start=line_range.start + 1,
        end=line_range.end + 1,
        changed=changed,
    )
    return AlignOutput(
        start=line_range.start + 1,
        end=line_range.end + 1,
        lines=tuple(updated),
        changed=changed,
    )


operation(
    OperationSpec(
        name="align.run",
        handler=align_run_sync,
        input_type=AlignInput,
        output_type=AlignOutput,
        cli_group="root",
        cli_name="align",
        description="Align delimiter-separated lines into columns.",
    )
)
