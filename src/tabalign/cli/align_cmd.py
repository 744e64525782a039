"""CLI handlers for align and indent."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from tabalign.cli.io import read_buffer, write_buffer
from tabalign.lib.config import load_config
from tabalign.lib.config._paths import resolve_project_root
from tabalign.lib.ops.align import AlignInput, AlignOutput
from tabalign.lib.ops.indent import IndentDetectInput, IndentDetectOutput
from tabalign.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]
AlignHandler = Callable[[AlignInput], AlignOutput]
IndentHandler = Callable[[IndentDetectInput], IndentDetectOutput]


def _resolve_inputs(delimiter: str | None, spec: str | None) -> tuple[str, str]:
    if delimiter and spec is not None:
        return delimiter, spec
    # Explicit flags win; config is only consulted for what is missing.
    config = load_config(resolve_project_root())
    resolved_delimiter = delimiter or config.default_delimiter
    if not resolved_delimiter:
        raise ValueError(
            "Delimiter cannot be empty. Pass --delimiter or set [defaults].delimiter "
            "in .tabalign.toml."
        )
    resolved_spec = spec if spec is not None else config.default_format
    return resolved_delimiter, resolved_spec


def _align(
    emit: Emitter,
    run: AlignHandler,
    path: str | None = None,
    delimiter: Annotated[
        str | None,
        Parameter(name=["--delimiter", "-d"], help="Delimiter regular expression."),
    ] = None,
    spec: Annotated[
        str | None,
        Parameter(
            name=["--spec", "-f"],
            help="Format specifiers ([lcr][0-9]+)*, e.g. l1r2. Empty means l1.",
        ),
    ] = None,
    start: Annotated[
        int | None,
        Parameter(name="--start", help="First line of the selection (1-based)."),
    ] = None,
    end: Annotated[
        int | None,
        Parameter(name="--end", help="Last line of the selection (inclusive)."),
    ] = None,
    line: Annotated[
        int | None,
        Parameter(
            name="--line",
            help="Cursor line; expands over neighbouring lines containing the delimiter.",
        ),
    ] = None,
    in_place: Annotated[
        bool,
        Parameter(name=["--in-place", "-i"], help="Rewrite PATH instead of printing."),
    ] = False,
) -> None:
    resolved_delimiter, resolved_spec = _resolve_inputs(delimiter, spec)
    buffer = read_buffer(path)
    result = run(
        AlignInput(
            lines=buffer.lines,
            delimiter=resolved_delimiter,
            format_spec=resolved_spec,
            start=start,
            end=end,
            cursor=line,
        )
    )
    if in_place:
        write_buffer(buffer, result.lines)
        return
    emit(result)


def _indent(emit: Emitter, run: IndentHandler, path: str | None = None) -> None:
    buffer = read_buffer(path)
    emit(run(IndentDetectInput(lines=buffer.lines)))


def register_root_commands(app: App, emit: Emitter) -> None:
    commands: dict[str, Callable[..., None]] = {
        "align.run": _align,
        "indent.detect": _indent,
    }

    for op in get_all_operations():
        if op.cli_group != "root":
            continue
        command = commands.get(op.name)
        if command is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = partial(command, emit, op.handler)
        handler.__name__ = f"cmd_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
