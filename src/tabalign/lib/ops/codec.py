"""Coercion of untyped request payloads into operation input dataclasses."""

from __future__ import annotations

import types
from collections.abc import Mapping
from dataclasses import MISSING, fields, is_dataclass
from pathlib import Path
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

PayloadT = TypeVar("PayloadT")


def normalize_optional(annotation: Any) -> tuple[Any, bool]:
    """Return the wrapped type + whether the annotation is `T | None`."""

    origin = get_origin(annotation)
    if origin is types.UnionType or origin is Union:
        args = get_args(annotation)
        non_none_args = [arg for arg in args if arg is not type(None)]
        if len(non_none_args) == 1 and len(non_none_args) != len(args):
            return non_none_args[0], True
    return annotation, False


def coerce_value(annotation: Any, value: object, *, source: str) -> object:
    normalized, optional = normalize_optional(annotation)
    if value is None:
        if optional:
            return None
        raise ValueError(f"Field '{source}' cannot be null.")

    if get_origin(normalized) is tuple:
        if not isinstance(value, list | tuple):
            raise ValueError(f"Field '{source}' must be an array.")
        item_type = get_args(normalized)[0]
        items = cast("list[object]", list(value))
        return tuple(coerce_value(item_type, item, source=source) for item in items)
    if normalized is str:
        if not isinstance(value, str):
            raise ValueError(f"Field '{source}' must be a string, got {type(value).__name__}.")
        return value
    if normalized is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Field '{source}' must be an integer, got {value!r}.")
        return value
    if normalized is Path:
        return Path(str(value))
    return value


def coerce_input_payload(payload_type: type[PayloadT], raw_input: object) -> PayloadT:
    """Build `payload_type` from a JSON object, rejecting unknown fields."""

    if not is_dataclass(payload_type):
        raise TypeError(f"{payload_type.__name__} is not a dataclass input type")

    if raw_input is None:
        data: dict[str, object] = {}
    elif isinstance(raw_input, Mapping):
        data = {
            str(key): item for key, item in cast("Mapping[object, object]", raw_input).items()
        }
    else:
        raise ValueError(f"Input must be an object, got {type(raw_input).__name__}.")

    hints = get_type_hints(payload_type)
    known = {field.name for field in fields(payload_type)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown input field(s): {', '.join(unknown)}.")

    kwargs: dict[str, object] = {}
    for field in fields(payload_type):
        if field.name in data:
            kwargs[field.name] = coerce_value(
                hints[field.name], data[field.name], source=field.name
            )
            continue
        if field.default is MISSING and field.default_factory is MISSING:
            raise ValueError(f"Missing required field '{field.name}'.")

    return cast("PayloadT", payload_type(**kwargs))
