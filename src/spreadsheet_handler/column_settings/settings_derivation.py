"""Declarative record schema and settings derivation."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .settings_models import ColumnDefinition, DocumentSettings

COLUMN_METADATA_KEY = "spreadsheet_column"
RECORD_METADATA_ATTRIBUTE = "__spreadsheet_record__"

RecordType = TypeVar("RecordType", bound=type)


@dataclass(frozen=True)
class ColumnMetadata:
    """Column metadata attached to a dataclass field."""

    column_name: str | None
    required: bool
    repeated: bool


@dataclass(frozen=True)
class RecordMetadata:
    """Document-level metadata attached to a record class."""

    allow_empty_cells: bool = False
    repeated_from_column: int | None = None


def spreadsheet_record(
    *, allow_empty_cells: bool = False, repeated_from_column: int | None = None
) -> Callable[[RecordType], RecordType]:
    """Class decorator declaring how a record type maps onto a sheet.

    Args:
      allow_empty_cells: Whether blank cells are tolerated.
      repeated_from_column: Zero-based column index from which trailing columns
        repeat the single repeated field.
    """
    metadata = RecordMetadata(
        allow_empty_cells=allow_empty_cells,
        repeated_from_column=repeated_from_column,
    )

    def decorate(record_type: RecordType) -> RecordType:
        setattr(record_type, RECORD_METADATA_ATTRIBUTE, metadata)
        return record_type

    return decorate


def spreadsheet_column(
    column_name: str | None = None,
    *,
    required: bool = False,
    repeated: bool = False,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field that maps onto a spreadsheet column.

    Extra keyword arguments (``default``, ``default_factory``...) are passed
    through to ``dataclasses.field``.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[COLUMN_METADATA_KEY] = ColumnMetadata(
        column_name=column_name, required=required, repeated=repeated
    )
    return dataclasses.field(metadata=metadata, **field_kwargs)


def derive_settings(record_type: type) -> DocumentSettings:
    """Build document settings from a record type's declared metadata."""
    record_metadata = getattr(record_type, RECORD_METADATA_ATTRIBUTE, None)
    if not isinstance(record_metadata, RecordMetadata):
        record_metadata = RecordMetadata()

    columns: list[ColumnDefinition] = []
    if dataclasses.is_dataclass(record_type):
        for record_field in dataclasses.fields(record_type):
            column_metadata = record_field.metadata.get(COLUMN_METADATA_KEY)
            if not isinstance(column_metadata, ColumnMetadata):
                continue
            columns.append(
                ColumnDefinition(
                    column_name=column_metadata.column_name or record_field.name,
                    field_id=record_field.name,
                    required=column_metadata.required,
                    repeated=column_metadata.repeated,
                )
            )

    return DocumentSettings(
        allow_empty_cells=record_metadata.allow_empty_cells,
        repeated_from_column=record_metadata.repeated_from_column,
        columns=tuple(columns),
    )
