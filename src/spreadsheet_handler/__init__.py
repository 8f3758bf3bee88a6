"""Settings-driven conversion between spreadsheets and tables or typed records."""

import logging

from .column_settings import (
    ColumnDefinition,
    DocumentSettings,
    derive_settings,
    spreadsheet_column,
    spreadsheet_record,
)
from .configuration import ConfigurationError, load_settings
from .handler import RecordMappingError, SpreadsheetHandler, map_document_to_records
from .sheet_contents import Cell, Document, Row, Table
from .validation_reporting import IssueKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Cell",
    "ColumnDefinition",
    "ConfigurationError",
    "Document",
    "DocumentSettings",
    "IssueKind",
    "RecordMappingError",
    "Row",
    "SpreadsheetHandler",
    "Table",
    "derive_settings",
    "load_settings",
    "map_document_to_records",
    "spreadsheet_column",
    "spreadsheet_record",
]
