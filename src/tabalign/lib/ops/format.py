"""format.parse operation."""

from __future__ import annotations

from dataclasses import dataclass

from tabalign.lib.formats import DEFAULT_FORMAT_SPEC, FormatItem, resolve_formats
from tabalign.lib.formatting import FormatContext
from tabalign.lib.ops.registry import OperationSpec, operation

_ALIGNMENT_NAMES = {"l": "left", "c": "center", "r": "right"}


@dataclass(frozen=True, slots=True)
class FormatParseInput:
    spec: str = ""


@dataclass(frozen=True, slots=True)
class FormatParseOutput:
    spec: str
    items: tuple[FormatItem, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        resolved = ctx or FormatContext()
        if resolved.verbosity < 0:
            return self.spec
        lines = [f"spec: {self.spec}"]
        for index, item in enumerate(self.items):
            lines.append(
                f"  column {index}: {_ALIGNMENT_NAMES[item.alignment.value]}, pad {item.pad}"
            )
        if len(self.items) > 1:
            lines.append(f"  columns past {len(self.items) - 1} reuse these in order")
        return "\n".join(lines)

    def porcelain_lines(self) -> list[str]:
        return [
            f"{index}\t{item.alignment.value}\t{item.pad}"
            for index, item in enumerate(self.items)
        ]


def format_parse_sync(payload: FormatParseInput) -> FormatParseOutput:
    spec = payload.spec or DEFAULT_FORMAT_SPEC
    return FormatParseOutput(spec=spec, items=resolve_formats(spec))


operation(
    OperationSpec(
        name="format.parse",
        handler=format_parse_sync,
        input_type=FormatParseInput,
        output_type=FormatParseOutput,
        cli_group="format",
        cli_name="parse",
        description="Validate a format specifier and show its column directives.",
    )
)
