"""Generic table reading service."""

from __future__ import annotations

from spreadsheet_handler.column_settings import DocumentSettings
from spreadsheet_handler.sheet_contents import Table
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter
from spreadsheet_handler.workbook_access import SheetRow, SheetView


def read_table(
    sheet: SheetView, settings: DocumentSettings | None, reporter: IssueReporter
) -> Table:
    """Read a sheet into a header plus rows of raw cell text.

    The first row supplies the column names and fixes the table width. Rows
    without values keep their place as rows of empty strings when a later row
    holds data; blank rows at the end of the sheet are dropped. Repeated-column
    settings are not used: a table always has as many columns as its header.

    Raises:
      ValidationAbort: When the reporter stops the read.
    """
    rows = sheet.rows()
    header = next(rows, None)
    if header is None:
        return Table(column_names=(), rows=())

    column_names = [cell.text for cell in header.cells]
    required_indexes = _required_column_indexes(column_names, settings)

    table_rows: list[list[str]] = []
    blank_rows: list[SheetRow] = []
    for row in rows:
        if row.is_empty:
            blank_rows.append(row)
            continue
        for blank_row in blank_rows:
            table_rows.append(
                _read_row(blank_row, column_names, settings, required_indexes, reporter)
            )
        blank_rows.clear()
        table_rows.append(_read_row(row, column_names, settings, required_indexes, reporter))

    return Table(column_names=column_names, rows=table_rows)


def _required_column_indexes(
    column_names: list[str], settings: DocumentSettings | None
) -> frozenset[int]:
    if settings is None:
        return frozenset()
    return frozenset(
        index for index, name in enumerate(column_names) if settings.is_required_column(name)
    )


def _read_row(
    row: SheetRow,
    column_names: list[str],
    settings: DocumentSettings | None,
    required_indexes: frozenset[int],
    reporter: IssueReporter,
) -> list[str]:
    width = len(column_names)
    if settings is not None and not settings.allow_empty_cells and row.has_blank_cell(width):
        reporter.report(
            IssueKind.ROW_HAS_BLANK_CELL,
            f"Empty cell found in row {row.index}, but empty cells are not allowed.",
            row=row.index,
        )

    values: list[str] = []
    for column_index in range(width):
        cell = row.cell(column_index)
        text = cell.text if cell is not None else ""
        if column_index in required_indexes and text == "":
            reporter.report(
                IssueKind.REQUIRED_CELL_EMPTY,
                f"Required cell {column_names[column_index]} of row {row.index} is empty.",
                row=row.index,
                column=column_names[column_index],
            )
        values.append(text)
    return values
