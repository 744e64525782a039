"""Format specifier parsing: `([lcr][0-9]+)*` into column directives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tabalign.lib.errors import FormatSyntaxError

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_FORMAT_SPEC = "l1"
FORMAT_ITEM_GRAMMAR = "[lcr][0-9]+"

_FORMAT_ITEM_RE = re.compile(r"([lcr])([0-9]+)")


class Alignment(StrEnum):
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"


@dataclass(frozen=True, slots=True)
class FormatItem:
    """Rendering rule for one column.

    `pad` is the number of spaces appended after the cell when the cell is
    followed by a delimiter.
    """

    alignment: Alignment
    pad: int

    def __str__(self) -> str:
        return f"{self.alignment.value}{self.pad}"


def parse_format_spec(spec: str) -> tuple[FormatItem, ...]:
    """Parse a format specifier string.

    >>> [str(item) for item in parse_format_spec("r2c3")]
    ['r2', 'c3']

    An empty string parses to an empty tuple; use `resolve_formats()` to get
    the default substitution.
    """

    items: list[FormatItem] = []
    offset = 0
    while offset < len(spec):
        match = _FORMAT_ITEM_RE.match(spec, offset)
        if match is None:
            raise FormatSyntaxError(spec, offset, FORMAT_ITEM_GRAMMAR)
        items.append(FormatItem(alignment=Alignment(match.group(1)), pad=int(match.group(2))))
        offset = match.end()
    return tuple(items)


def resolve_formats(spec: str | None) -> tuple[FormatItem, ...]:
    """Parse `spec`, substituting the default `l1` when it is empty."""

    if spec is None or spec == "":
        spec = DEFAULT_FORMAT_SPEC
    return parse_format_spec(spec)


def format_spec_text(items: Iterable[FormatItem]) -> str:
    return "".join(str(item) for item in items)
