"""config.show operation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tabalign.lib.config._paths import resolve_project_root
from tabalign.lib.config.settings import load_config
from tabalign.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from tabalign.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    project_root: Path | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    default_delimiter: str | None
    default_format: str
    source: str | None

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        delimiter = self.default_delimiter if self.default_delimiter is not None else "(unset)"
        return "\n".join(
            (
                f"delimiter: {delimiter}",
                f"format: {self.default_format}",
                f"source: {self.source or '(defaults)'}",
            )
        )


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    config = load_config(resolve_project_root(payload.project_root))
    return ConfigShowOutput(
        default_delimiter=config.default_delimiter,
        default_format=config.default_format,
        source=config.source.as_posix() if config.source is not None else None,
    )


operation(
    OperationSpec(
        name="config.show",
        handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
        cli_group="config",
        cli_name="show",
        description="Show resolved delimiter and format defaults.",
    )
)
