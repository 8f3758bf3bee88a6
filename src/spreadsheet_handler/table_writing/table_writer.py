"""Generic table writing service."""

from __future__ import annotations

from io import BytesIO

from spreadsheet_handler.column_settings import DocumentSettings
from spreadsheet_handler.sheet_contents import Table
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter
from spreadsheet_handler.workbook_access import build_workbook


def write_table(
    table: Table, settings: DocumentSettings | None, reporter: IssueReporter
) -> BytesIO:
    """Write a table to a new single-sheet workbook.

    Required columns are checked; the empty-cell policy is not applied to
    table writes.

    Raises:
      ValidationAbort: When the table has no rows or the reporter stops the write.
    """
    if not table.rows:
        reporter.fail(IssueKind.NO_DATA_TO_WRITE, "No data to write.")

    required_indexes = {
        index
        for index, name in enumerate(table.column_names)
        if settings is not None and settings.is_required_column(name)
    }

    sheet_rows: list[list[str]] = [list(table.column_names)]
    for row_number, row in enumerate(table.rows, start=1):
        for column_index in sorted(required_indexes):
            if row[column_index] == "":
                column_name = table.column_names[column_index]
                reporter.report(
                    IssueKind.REQUIRED_CELL_EMPTY,
                    f"Required cell {column_name} of row {row_number} is empty.",
                    row=row_number,
                    column=column_name,
                )
        sheet_rows.append(list(row))

    return build_workbook(sheet_rows)
