"""Typed record writing service."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from io import BytesIO

from spreadsheet_handler.column_settings import ColumnDefinition, DocumentSettings
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter
from spreadsheet_handler.workbook_access import build_workbook, cell_text

FieldAccessor = Callable[[object, str], object | None]


def read_field(record: object, field_id: str) -> object | None:
    """Default field accessor: mapping key lookup, otherwise attribute lookup."""
    if isinstance(record, Mapping):
        return record.get(field_id)
    return getattr(record, field_id, None)


def write_records(
    records: Sequence[object],
    settings: DocumentSettings,
    reporter: IssueReporter,
    field_accessor: FieldAccessor = read_field,
) -> BytesIO:
    """Write records to a new single-sheet workbook, one row per record.

    Columns follow ``settings.columns`` after the inclusion filter. A repeated
    last column writes one cell per element of its sequence value.

    Raises:
      ValidationAbort: When there is nothing to write, no column remains, or the
        reporter stops the write.
    """
    if not records:
        reporter.fail(IssueKind.NO_DATA_TO_WRITE, "No data to write.")

    effective_settings = settings.applying_included_columns()
    columns = effective_settings.columns
    if not columns:
        reporter.fail(
            IssueKind.NO_COLUMNS_CONFIGURED,
            f"No columns defined for spreadsheet on type {type(records[0]).__name__}.",
        )

    sheet_rows: list[list[str]] = [[column.column_name for column in columns]]
    for row_number, record in enumerate(records, start=1):
        sheet_rows.append(
            _record_values(
                record,
                row_number=row_number,
                settings=effective_settings,
                reporter=reporter,
                field_accessor=field_accessor,
            )
        )
    return build_workbook(sheet_rows)


def _record_values(
    record: object,
    *,
    row_number: int,
    settings: DocumentSettings,
    reporter: IssueReporter,
    field_accessor: FieldAccessor,
) -> list[str]:
    values: list[str] = []
    last_index = len(settings.columns) - 1
    for column_index, column in enumerate(settings.columns):
        value = _field_value(record, column, field_accessor)
        if not settings.allow_empty_cells and value is None:
            reporter.report(
                IssueKind.ROW_HAS_BLANK_CELL,
                f"Empty cell found in column {column.column_name} of row {row_number}, "
                "but empty cells are not allowed.",
                row=row_number,
                column=column.column_name,
            )
        if column.required and value is None:
            reporter.report(
                IssueKind.REQUIRED_CELL_EMPTY,
                f"Required cell {column.column_name} of row {row_number} is empty.",
                row=row_number,
                column=column.column_name,
            )

        if column.repeated and column_index == last_index:
            values.extend(_repeated_values(value, column, row_number, reporter))
        else:
            values.append(cell_text(value))
    return values


def _field_value(
    record: object, column: ColumnDefinition, field_accessor: FieldAccessor
) -> object | None:
    if not column.field_id or not column.field_id.strip():
        return None
    return field_accessor(record, column.field_id)


def _repeated_values(
    value: object | None, column: ColumnDefinition, row_number: int, reporter: IssueReporter
) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        reporter.report(
            IssueKind.REPEATED_VALUE_NOT_COLLECTION,
            f"Repeated column {column.column_name} of row {row_number} is not a sequence; "
            "no cells written.",
            row=row_number,
            column=column.column_name,
        )
        return []
    return [cell_text(item) for item in value]
