"""Output rendering for CLI commands.

`text` uses each result's `format_text()`. `json` prints one JSON document.
`porcelain` prints stable tab-separated lines for scripts: results that
define `porcelain_lines()` choose their own rows (aligned output is
`<line number>\\t<text>` per replaced line), anything else becomes one
`key=value` record.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, cast

from tabalign.lib.formatting import FormatContext, PorcelainFormattable, TextFormattable
from tabalign.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json", "porcelain"]
_OUTPUT_FORMATS = frozenset({"text", "json", "porcelain"})


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat
    verbosity: int = 0


def normalize_output_format(
    *,
    requested: str | None,
    json_mode: bool,
    porcelain_mode: bool,
) -> OutputFormat:
    """Resolve the final output format from flags; text is the default."""

    if json_mode:
        return "json"
    if porcelain_mode:
        return "porcelain"
    if not requested:
        return "text"
    normalized = requested.strip().lower()
    if normalized not in _OUTPUT_FORMATS:
        raise SystemExit("--format must be one of: text, json, porcelain")
    return cast("OutputFormat", normalized)


def porcelain_record(value: Any) -> str:
    payload = to_jsonable(value)
    if not isinstance(payload, dict):
        return str(payload)
    fields = cast("dict[str, object]", payload)
    return "\t".join(
        f"{key}={json.dumps(item) if isinstance(item, (dict, list)) else item}"
        for key, item in sorted(fields.items())
    )


def render(value: Any, config: OutputConfig) -> str:
    """Render one result in the configured mode, without a trailing newline."""

    if config.format == "json":
        return json.dumps(to_jsonable(value), sort_keys=True)
    if config.format == "porcelain":
        if isinstance(value, PorcelainFormattable):
            return "\n".join(value.porcelain_lines())
        return porcelain_record(value)
    if isinstance(value, TextFormattable):
        return value.format_text(FormatContext(verbosity=config.verbosity))
    return str(value)


def emit(value: Any, config: OutputConfig) -> None:
    """Print one result according to the configured output mode."""

    print(render(value, config))
