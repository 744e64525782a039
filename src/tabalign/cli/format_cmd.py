"""CLI handlers for format.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Any

from tabalign.lib.ops.format import FormatParseInput, FormatParseOutput
from tabalign.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]
FormatParseHandler = Callable[[FormatParseInput], FormatParseOutput]


def _format_parse(emit: Emitter, run: FormatParseHandler, spec: str = "") -> None:
    emit(run(FormatParseInput(spec=spec)))


def register_format_commands(app: App, emit: Emitter) -> None:
    commands: dict[str, Callable[..., None]] = {
        "format.parse": _format_parse,
    }

    for op in get_all_operations():
        if op.cli_group != "format":
            continue
        command = commands.get(op.name)
        if command is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = partial(command, emit, op.handler)
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
