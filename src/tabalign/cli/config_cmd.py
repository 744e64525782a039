"""CLI handlers for config.* operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Any

from tabalign.lib.ops.config import ConfigShowInput, ConfigShowOutput
from tabalign.lib.ops.registry import get_all_operations

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]
ConfigShowHandler = Callable[[ConfigShowInput], ConfigShowOutput]


def _config_show(emit: Emitter, run: ConfigShowHandler) -> None:
    emit(run(ConfigShowInput()))


def register_config_commands(app: App, emit: Emitter) -> None:
    commands: dict[str, Callable[..., None]] = {
        "config.show": _config_show,
    }

    for op in get_all_operations():
        if op.cli_group != "config":
            continue
        command = commands.get(op.name)
        if command is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = partial(command, emit, op.handler)
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
