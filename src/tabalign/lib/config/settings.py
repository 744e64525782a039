"""Project-level defaults loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from tabalign.lib.config._paths import config_path
from tabalign.lib.errors import FormatSyntaxError
from tabalign.lib.formats import DEFAULT_FORMAT_SPEC, parse_format_spec
from tabalign.lib.split import compile_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TabalignConfig:
    """Resolved defaults for delimiter and format prompts."""

    default_delimiter: str | None = None
    default_format: str = DEFAULT_FORMAT_SPEC
    source: Path | None = None


_DEFAULTS_KEY_MAP: dict[str, str] = {
    "delimiter": "default_delimiter",
    "format": "default_format",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "TABALIGN_DEFAULT_DELIMITER": "default_delimiter",
    "TABALIGN_DEFAULT_FORMAT": "default_format",
}


def _coerce_string(*, raw_value: object, source: str) -> str:
    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return raw_value


def _validate(values: dict[str, str | None], *, source: str) -> None:
    delimiter = values["default_delimiter"]
    if delimiter is not None:
        compile_pattern(delimiter)
    format_spec = values["default_format"] or DEFAULT_FORMAT_SPEC
    try:
        parse_format_spec(format_spec)
    except FormatSyntaxError as error:
        raise ValueError(f"Invalid default format in {source}: {error}") from error
    values["default_format"] = format_spec


def _apply_toml_payload(
    *,
    values: dict[str, str | None],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        if key != "defaults":
            logger.warning("Ignoring unknown tabalign config key '%s'.", key)
            continue
        if not isinstance(raw_value, dict):
            raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
        for section_key, section_value in cast("dict[str, object]", raw_value).items():
            field_name = _DEFAULTS_KEY_MAP.get(section_key)
            if field_name is None:
                logger.warning(
                    "Ignoring unknown tabalign config key '%s.%s'.", key, section_key
                )
                continue
            values[field_name] = _coerce_string(
                raw_value=section_value,
                source=f"{key}.{section_key}",
            )


def _apply_env_overrides(values: dict[str, str | None]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        # An exported-but-empty variable counts as unset.
        if not raw_value:
            continue
        values[field_name] = raw_value


def load_config(project_root: Path) -> TabalignConfig:
    """Load `.tabalign.toml` from `project_root` and apply environment overrides."""

    values: dict[str, str | None] = {
        "default_delimiter": None,
        "default_format": DEFAULT_FORMAT_SPEC,
    }
    path = config_path(project_root)
    source: Path | None = None
    if path.is_file():
        payload = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
        _apply_toml_payload(values=values, payload=payload, path=path)
        source = path

    _apply_env_overrides(values)
    _validate(values, source=str(path))
    return TabalignConfig(
        default_delimiter=values["default_delimiter"],
        default_format=cast("str", values["default_format"]),
        source=source,
    )
