"""Common indentation detection."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_LEADING_WHITESPACE_RE = re.compile(r"\s*")


def common_prefix(a: str, b: str) -> str:
    """Longest common character-by-character prefix of two strings."""

    j = 0
    limit = min(len(a), len(b))
    while j < limit and a[j] == b[j]:
        j += 1
    return a[:j]


def leading_whitespace(line: str) -> str:
    match = _LEADING_WHITESPACE_RE.match(line)
    return match.group(0) if match is not None else ""


def detect_common_indentation(lines: Iterable[str]) -> str:
    """Return the whitespace prefix shared by every non-blank line.

    Blank and whitespace-only lines do not constrain the result. If every
    line is blank (or there are none), the result is the empty string.
    """

    indentation: str | None = None
    for line in lines:
        if not line.strip():
            continue
        current = leading_whitespace(line)
        indentation = current if indentation is None else common_prefix(indentation, current)
    return indentation or ""
