"""Column settings exports."""

from .settings_derivation import (
    ColumnMetadata,
    RecordMetadata,
    derive_settings,
    spreadsheet_column,
    spreadsheet_record,
)
from .settings_models import ColumnDefinition, DocumentSettings

__all__ = [
    "ColumnDefinition",
    "ColumnMetadata",
    "DocumentSettings",
    "RecordMetadata",
    "derive_settings",
    "spreadsheet_column",
    "spreadsheet_record",
]
