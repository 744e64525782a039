"""Format specifier parsing tests."""

from __future__ import annotations

import pytest

from tabalign.lib.errors import FormatSyntaxError
from tabalign.lib.formats import (
    Alignment,
    FormatItem,
    format_spec_text,
    parse_format_spec,
    resolve_formats,
)


@pytest.mark.parametrize(
    "spec,expected",
    [
        pytest.param("l1", (FormatItem(Alignment.LEFT, 1),), id="single-left"),
        pytest.param(
            "r2c3",
            (FormatItem(Alignment.RIGHT, 2), FormatItem(Alignment.CENTER, 3)),
            id="right-then-center",
        ),
        pytest.param("l0", (FormatItem(Alignment.LEFT, 0),), id="zero-pad"),
        pytest.param("c12", (FormatItem(Alignment.CENTER, 12),), id="multi-digit-pad"),
        pytest.param("", (), id="empty"),
    ],
)
def test_parse_format_spec(spec: str, expected: tuple[FormatItem, ...]) -> None:
    assert parse_format_spec(spec) == expected


@pytest.mark.parametrize(
    "spec,offset",
    [
        pytest.param("x1", 0, id="unknown-alignment"),
        pytest.param("l", 0, id="missing-digits"),
        pytest.param("l1r", 2, id="trailing-alignment"),
        pytest.param("l1 r2", 2, id="embedded-space"),
        pytest.param("L1", 0, id="uppercase"),
    ],
)
def test_parse_format_spec_reports_failing_offset(spec: str, offset: int) -> None:
    with pytest.raises(FormatSyntaxError) as excinfo:
        parse_format_spec(spec)

    assert excinfo.value.offset == offset
    assert excinfo.value.expected == "[lcr][0-9]+"
    assert f"position {offset}" in str(excinfo.value)


def test_format_syntax_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_format_spec("q9")


def test_resolve_formats_substitutes_default_for_empty_input() -> None:
    assert resolve_formats("") == (FormatItem(Alignment.LEFT, 1),)
    assert resolve_formats(None) == (FormatItem(Alignment.LEFT, 1),)
    assert resolve_formats("r4") == (FormatItem(Alignment.RIGHT, 4),)


def test_resolve_formats_still_rejects_malformed_input() -> None:
    with pytest.raises(FormatSyntaxError):
        resolve_formats("r")


def test_format_spec_text_renders_items_back() -> None:
    assert format_spec_text(parse_format_spec("l1r02c3")) == "l1r2c3"
    assert str(FormatItem(Alignment.CENTER, 5)) == "c5"
