"""Typed row reading service."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from spreadsheet_handler.column_settings import ColumnDefinition, DocumentSettings
from spreadsheet_handler.sheet_contents import Cell, Document, Row
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter, ValidationAbort
from spreadsheet_handler.workbook_access import SheetRow, SheetView


def read_rows(sheet: SheetView, settings: DocumentSettings, reporter: IssueReporter) -> Document:
    """Read a sheet into rows of cells resolved against the column definitions.

    Row 0 is the header. Data rows whose cells are all blank are skipped, and
    columns without a matching definition are dropped. Columns at or after
    ``settings.repeated_from_column`` map onto the single repeated definition,
    including cells that run past the end of the header. Blank cells
    are not collected into the repeated field.

    The empty-cell policy looks at the cells a row holds, up to its last value;
    columns the row stops short of and the repeated region are not checked.

    A required cell that is empty is logged and left out of its row. When that
    stops the read, the rows built so far, including the current one, are
    returned instead of raising.

    Raises:
      ValidationAbort: When a blank header cell or a row with blank cells stops
        the read.
    """
    rows = sheet.rows()
    header = next(rows, None)
    if header is None:
        return Document(rows=())

    column_names = _read_header(header, reporter)
    header_width = len(header.cells)

    document_rows: list[Row] = []
    for row in rows:
        values = {cell.column_index: cell.text for cell in row.cells if not cell.is_blank}
        if not any(value.strip() for value in values.values()):
            continue
        if not settings.allow_empty_cells and _has_blank_cell(row, settings):
            reporter.report(
                IssueKind.ROW_HAS_BLANK_CELL,
                f"Row {_row_number(row, header)} contains empty cells.",
                row=_row_number(row, header),
            )

        mapped_row, stopped = _map_row(
            number=_row_number(row, header),
            values=values,
            columns=_row_columns(column_names, header_width, row, settings),
            settings=settings,
            reporter=reporter,
        )
        document_rows.append(mapped_row)
        if stopped:
            break

    return Document(rows=tuple(document_rows))


def _read_header(header: SheetRow, reporter: IssueReporter) -> dict[int, str]:
    column_names: dict[int, str] = {}
    blank_logged = False
    for cell in header.cells:
        if cell.is_blank or not cell.text.strip():
            if not blank_logged:
                blank_logged = True
                reporter.report(
                    IssueKind.HEADER_CELL_BLANK,
                    "First row contains an empty column; the column is skipped.",
                    row=0,
                )
            continue
        column_names[cell.column_index] = cell.text
    return column_names


def _has_blank_cell(row: SheetRow, settings: DocumentSettings) -> bool:
    cells = row.cells
    if settings.repeats_trailing_columns:
        cells = cells[: settings.repeated_from_column]
    return any(cell.is_blank for cell in cells)


def _row_number(row: SheetRow, header: SheetRow) -> int:
    return row.index - header.index + 1


def _row_columns(
    column_names: Mapping[int, str],
    header_width: int,
    row: SheetRow,
    settings: DocumentSettings,
) -> Iterator[tuple[int, str]]:
    yield from column_names.items()

    repeated = settings.repeated_column()
    if repeated is None or not settings.repeats_trailing_columns:
        return
    start = max(header_width, settings.repeated_from_column or 0)
    for column_index in range(start, len(row.cells)):
        yield column_index, repeated.column_name


def _resolve_definition(
    settings: DocumentSettings, column_index: int, column_name: str
) -> ColumnDefinition | None:
    threshold = settings.repeated_from_column
    if settings.repeats_trailing_columns and threshold is not None and column_index >= threshold:
        return settings.repeated_column()
    return settings.find_column(column_name)


def _map_row(
    *,
    number: int,
    values: Mapping[int, str],
    columns: Iterator[tuple[int, str]],
    settings: DocumentSettings,
    reporter: IssueReporter,
) -> tuple[Row, bool]:
    cells: list[Cell] = []
    for column_index, column_name in columns:
        definition = _resolve_definition(settings, column_index, column_name)
        if definition is None:
            continue
        value = values.get(column_index, "")
        if definition.required and not value.strip():
            try:
                reporter.report(
                    IssueKind.REQUIRED_CELL_EMPTY,
                    f"Row {number}, column {column_index + 1}: required column is empty.",
                    row=number,
                    column=column_name,
                )
            except ValidationAbort:
                return Row(number=number, cells=tuple(cells)), True
            continue
        if definition.repeated and not value:
            continue
        cells.append(
            Cell(
                column_name=column_name,
                field_id=definition.field_id,
                value=value,
                required=definition.required,
            )
        )
    return Row(number=number, cells=tuple(cells)), False
