"""Last-used input memory tests."""

from __future__ import annotations

from tabalign.lib.session import RecalledInputs, TabularizeSession


def test_new_session_recalls_nothing() -> None:
    assert TabularizeSession().recall() == RecalledInputs()


def test_session_remembers_latest_inputs() -> None:
    session = TabularizeSession()
    session.remember(delimiter=",", format_spec="l1")
    session.remember(delimiter=r"\|")

    assert session.recall() == RecalledInputs(delimiter=r"\|", format_spec="l1")


def test_session_keeps_empty_format_spec() -> None:
    session = TabularizeSession()
    session.remember(format_spec="")

    assert session.recall().format_spec == ""


def test_session_clear() -> None:
    session = TabularizeSession()
    session.remember(delimiter="=", format_spec="r2")
    session.clear()

    assert session.recall() == RecalledInputs()
