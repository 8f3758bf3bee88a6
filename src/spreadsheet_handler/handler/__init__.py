"""Spreadsheet handler facade exports."""

from .record_mapping import RecordMappingError, map_document_to_records
from .spreadsheet_handler import PACKAGE_LOGGER_NAME, DocumentMapper, SpreadsheetHandler

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "DocumentMapper",
    "RecordMappingError",
    "SpreadsheetHandler",
    "map_document_to_records",
]
