"""Settings file loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from spreadsheet_handler.column_settings import ColumnDefinition, DocumentSettings


class ConfigurationError(Exception):
    """Raised when a settings file is invalid."""


def load_settings(settings_path: Path | str) -> DocumentSettings:
    """Load and validate a YAML (or JSON) settings file."""
    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")
    return parse_settings(parsed)


def parse_settings(section: Mapping[str, Any]) -> DocumentSettings:
    """Build document settings from an already parsed mapping."""
    allow_empty_cells = _optional_bool(section.get("allow_empty_cells"), "allow_empty_cells")
    repeated_from_column = _optional_non_negative_int(
        section.get("repeated_from_column"), "repeated_from_column"
    )
    columns = _parse_columns(section.get("columns"))
    included_columns = _normalize_string_sequence(
        section.get("included_columns"), "included_columns"
    )
    try:
        return DocumentSettings(
            allow_empty_cells=allow_empty_cells,
            repeated_from_column=repeated_from_column,
            columns=columns,
            included_columns=frozenset(included_columns),
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_columns(value: Any) -> tuple[ColumnDefinition, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("columns must be a list of column definitions.")
    return tuple(_parse_column(item, index) for index, item in enumerate(value))


def _parse_column(value: Any, index: int) -> ColumnDefinition:
    label = f"columns[{index}]"
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")
    column_name = _require_non_empty_string(value.get("column_name"), f"{label}.column_name")
    field_id = _optional_string(value.get("field_id"), f"{label}.field_id")
    return ColumnDefinition(
        column_name=column_name,
        field_id=field_id,
        required=_optional_bool(value.get("required"), f"{label}.required"),
        repeated=_optional_bool(value.get("repeated"), f"{label}.repeated"),
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _optional_non_negative_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
