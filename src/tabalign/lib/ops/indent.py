"""indent.detect operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tabalign.lib.indent import detect_common_indentation
from tabalign.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from tabalign.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class IndentDetectInput:
    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class IndentDetectOutput:
    indentation: str
    width: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return f"common indentation: {self.indentation!r} ({self.width} chars)"


def indent_detect_sync(payload: IndentDetectInput) -> IndentDetectOutput:
    indentation = detect_common_indentation(payload.lines)
    return IndentDetectOutput(indentation=indentation, width=len(indentation))


operation(
    OperationSpec(
        name="indent.detect",
        handler=indent_detect_sync,
        input_type=IndentDetectInput,
        output_type=IndentDetectOutput,
        cli_group="root",
        cli_name="indent",
        description="Show the indentation shared by all non-blank lines.",
    )
)
