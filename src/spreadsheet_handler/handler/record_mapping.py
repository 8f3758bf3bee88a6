"""Default mapping from typed rows to record instances."""

from __future__ import annotations

from typing import Any, TypeVar

from spreadsheet_handler.column_settings import DocumentSettings, derive_settings
from spreadsheet_handler.sheet_contents import Document

RecordT = TypeVar("RecordT")


class RecordMappingError(Exception):
    """Raised when a row cannot be turned into a record instance."""


def map_document_to_records(
    document: Document,
    record_type: type[RecordT],
    settings: DocumentSettings | None = None,
) -> list[RecordT]:
    """Build one record per row by passing cell values as keyword arguments.

    Cells are matched to constructor arguments by field identifier. The
    repeated field receives the list of its cell values; for other fields the
    first cell wins. Fields without a cell keep their declared defaults.
    """
    resolved_settings = settings or derive_settings(record_type)
    repeated_ids = {
        column.field_id
        for column in resolved_settings.columns
        if column.repeated and column.field_id
    }

    records: list[RecordT] = []
    for row in document.rows:
        values: dict[str, Any] = {field_id: [] for field_id in repeated_ids}
        for cell in row.cells:
            if not cell.field_id:
                continue
            if cell.field_id in repeated_ids:
                values[cell.field_id].append(cell.value)
            else:
                values.setdefault(cell.field_id, cell.value)
        try:
            records.append(record_type(**values))
        except TypeError as exc:
            raise RecordMappingError(
                f"Row {row.number}: cannot build {record_type.__name__}: {exc}"
            ) from exc
    return records
