"""Table rendering settings loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TableSettings:
    """Resolved rendering configuration for tables."""

    separator: str = "  "
    rule_char: str = "-"
    total_rule: bool = True


_ENV_OVERRIDE_MAP: dict[str, str] = {
    "TEXTGRID_SEPARATOR": "separator",
    "TEXTGRID_RULE_CHAR": "rule_char",
    "TEXTGRID_TOTAL_RULE": "total_rule",
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})
_SECTION_NAME = "table"


def _expected_type_name(field_name: str) -> str:
    if field_name == "total_rule":
        return "bool"
    return "str"


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "bool":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if field_name == "rule_char" and len(raw_value) != 1:
        raise ValueError(
            f"Invalid value for '{source}': expected a single character, got {raw_value!r}."
        )
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "bool":
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    # Whitespace is significant for separators; no stripping.
    if field_name == "rule_char" and len(raw_value) != 1:
        raise ValueError(
            f"Invalid environment override '{env_name}': expected a single character, "
            f"got {raw_value!r}."
        )
    return raw_value


def _default_values() -> dict[str, object]:
    defaults = TableSettings()
    return {field.name: getattr(defaults, field.name) for field in fields(TableSettings)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    known = set(values)
    for key, raw_value in payload.items():
        if key == _SECTION_NAME:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                if section_key not in known:
                    logger.warning(
                        "Ignoring unknown textgrid config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[section_key] = _coerce_file_value(
                    field_name=section_key,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        if key not in known:
            logger.warning("Ignoring unknown textgrid config key '%s'.", key)
            continue
        values[key] = _coerce_file_value(field_name=key, raw_value=raw_value, source=key)


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def load_settings(path: Path | None = None) -> TableSettings:
    """Load an optional TOML settings file and apply environment overrides."""

    values = _default_values()
    if path is not None and path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=path)

    _apply_env_overrides(values)
    return TableSettings(
        separator=cast("str", values["separator"]),
        rule_char=cast("str", values["rule_char"]),
        total_rule=cast("bool", values["total_rule"]),
    )
