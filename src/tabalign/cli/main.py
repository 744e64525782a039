"""Cyclopts CLI entry point for tabalign."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from tabalign import __version__
from tabalign.cli.align_cmd import register_root_commands
from tabalign.cli.config_cmd import register_config_commands
from tabalign.cli.format_cmd import register_format_commands
from tabalign.cli.output import OutputConfig, normalize_output_format
from tabalign.cli.output import emit as emit_output
from tabalign.lib.errors import ConfigurationInvariantViolation, TabalignError
from tabalign.server.main import run_server

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for the current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    porcelain_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--porcelain":
            porcelain_mode = True
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            i += 1
            continue
        if arg == "-q" or arg == "--quiet":
            verbosity = -1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(
        requested=output_format,
        json_mode=json_mode,
        porcelain_mode=porcelain_mode,
    )
    return cleaned, GlobalOptions(
        output=OutputConfig(format=resolved, verbosity=min(verbosity, 1)),
        verbosity=verbosity,
    )


app = App(
    name="tabalign",
    help="Align delimiter-separated text into columns.",
    version=__version__,
    help_formatter="plain",
)


@app.default
def root(
    json_mode: Annotated[
        bool,
        Parameter(name="--json", help="Emit command output as JSON."),
    ] = False,
    output_format: Annotated[
        str | None,
        Parameter(name="--format", help="Set output format: text, json, or porcelain."),
    ] = None,
    verbose: Annotated[
        bool,
        Parameter(name=["--verbose", "-v"], help="Log more detail to stderr (repeatable)."),
    ] = False,
) -> None:
    """Tabalign root command with global options."""

    _ = (json_mode, output_format, verbose)
    app.help_print()


format_app = App(name="format", help="Format specifier commands", help_formatter="plain")
config_app = App(name="config", help="Project config commands", help_formatter="plain")


@app.command(name="serve")
def serve() -> None:
    """Answer JSON-lines alignment requests on stdin until EOF."""

    run_server()


app.command(format_app, name="format")
app.command(config_app, name="config")


def _register_group_commands() -> None:
    register_root_commands(app, emit)
    register_format_commands(format_app, emit)
    register_config_commands(config_app, emit)


def _operation_error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `tabalign` and `python -m tabalign`."""

    from tabalign.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging before any command runs so warnings land on stderr.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.verbosity,
    )
    logger.debug("tabalign %s invoked with %s", __version__, cleaned_args)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except ConfigurationInvariantViolation:
            raise
        except (TabalignError, KeyError, ValueError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)


_register_group_commands()
