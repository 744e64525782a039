"""In-process memory of the last delimiter and format used."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecalledInputs:
    delimiter: str | None = None
    format_spec: str | None = None


class TabularizeSession:
    """Remembers the last inputs for prefilling the next prompt.

    Nothing is written to disk; the memory lives as long as the object.
    """

    def __init__(self) -> None:
        self._delimiter: str | None = None
        self._format_spec: str | None = None

    def remember(self, delimiter: str | None = None, format_spec: str | None = None) -> None:
        if delimiter is not None:
            self._delimiter = delimiter
        if format_spec is not None:
            self._format_spec = format_spec

    def recall(self) -> RecalledInputs:
        return RecalledInputs(delimiter=self._delimiter, format_spec=self._format_spec)

    def clear(self) -> None:
        self._delimiter = None
        self._format_spec = None
