"""Reading and writing line buffers for CLI commands.

Only `\\n` and `\\r\\n` end a line. Other characters that `str.splitlines()`
treats as breaks (form feed, vertical tab, U+2028, ...) stay inside the line
so line numbers match what editors show.
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class LineBuffer:
    """Lines without terminators plus each line's original terminator."""

    lines: tuple[str, ...]
    terminators: tuple[str, ...]
    path: Path | None = None


def split_buffer(text: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    if not text:
        return (), ()
    pieces = text.split("\n")
    lines: list[str] = []
    terminators: list[str] = []
    for piece in pieces[:-1]:
        if piece.endswith("\r"):
            lines.append(piece[:-1])
            terminators.append("\r\n")
        else:
            lines.append(piece)
            terminators.append("\n")
    # Text after the final newline is a last line without a terminator.
    if pieces[-1]:
        lines.append(pieces[-1])
        terminators.append("")
    return tuple(lines), tuple(terminators)


def join_buffer(lines: tuple[str, ...], terminators: tuple[str, ...]) -> str:
    if len(lines) != len(terminators):
        raise ValueError(
            f"Line count changed: {len(terminators)} lines read, {len(lines)} to write."
        )
    return "".join(line + end for line, end in zip(lines, terminators, strict=True))


def read_buffer(path: str | None) -> LineBuffer:
    """Read `path` (or stdin for None / `-`) into lines."""

    if path is None or path == "-":
        # Same newline handling as files; text-mode stdin would fold CRLF to LF.
        text = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="").read()
        source = None
    else:
        source = Path(path)
        # newline="" keeps CRLF intact instead of translating it to LF.
        with source.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    lines, terminators = split_buffer(text)
    return LineBuffer(lines=lines, terminators=terminators, path=source)


def write_buffer(buffer: LineBuffer, lines: tuple[str, ...]) -> None:
    if buffer.path is None:
        raise ValueError("--in-place requires a file path, not stdin.")
    text = join_buffer(lines, buffer.terminators)
    with buffer.path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
