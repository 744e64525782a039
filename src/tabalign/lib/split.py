"""Delimiter-preserving line splitting."""

from __future__ import annotations

import re
from typing import TypeAlias

from tabalign.lib.errors import PatternSyntaxError

DelimiterPattern: TypeAlias = str | re.Pattern[str]


def compile_pattern(pattern: DelimiterPattern) -> re.Pattern[str]:
    """Compile a delimiter regex, surfacing syntax problems as `PatternSyntaxError`."""

    if isinstance(pattern, re.Pattern):
        return pattern
    if pattern == "":
        raise PatternSyntaxError(pattern, "delimiter cannot be empty")
    try:
        return re.compile(pattern)
    except re.error as error:
        raise PatternSyntaxError(pattern, error.msg, error.pos) from error


def split_with_delimiters(line: str, pattern: re.Pattern[str]) -> list[str]:
    """Like `str.split`, but keeps every matched delimiter as its own token.

    The result alternates cell, delimiter, cell, ... and always has odd
    length. `finditer` steps one character past a zero-length match, so
    patterns that can match the empty string still terminate; each empty
    match yields an empty delimiter token.

    >>> split_with_delimiters("a = b = c", re.compile(r"="))
    ['a ', '=', ' b ', '=', ' c']
    """

    tokens: list[str] = []
    last = 0
    for match in pattern.finditer(line):
        tokens.append(line[last : match.start()])
        tokens.append(match.group(0))
        last = match.end()
    tokens.append(line[last:])
    return tokens


def split_row(line: str, pattern: re.Pattern[str]) -> tuple[str, ...]:
    """Split `line` and trim the cell tokens; delimiters are left verbatim."""

    return tuple(
        token if index % 2 == 1 else token.strip()
        for index, token in enumerate(split_with_delimiters(line, pattern))
    )


def line_matches(line: str, pattern: re.Pattern[str]) -> bool:
    return pattern.search(line) is not None
