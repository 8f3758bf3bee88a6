"""Spreadsheet mapping facade."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from io import BytesIO
from typing import TypeVar

from spreadsheet_handler.column_settings import DocumentSettings, derive_settings
from spreadsheet_handler.row_reading import read_rows
from spreadsheet_handler.sheet_contents import Document, Table
from spreadsheet_handler.table_reading import read_table
from spreadsheet_handler.table_writing import (
    FieldAccessor,
    read_field,
    write_records,
    write_table,
)
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter, ValidationAbort
from spreadsheet_handler.workbook_access import (
    SheetNotFoundError,
    SheetView,
    SourceNotFoundError,
    WorkbookSource,
    open_sheet,
)

from .record_mapping import map_document_to_records

PACKAGE_LOGGER_NAME = "spreadsheet_handler"

RecordT = TypeVar("RecordT")
ResultT = TypeVar("ResultT")

DocumentMapper = Callable[[Document], Iterable[RecordT]]


class SpreadsheetHandler:
    """Reads and writes spreadsheets through declarative column settings.

    Every operation returns ``None`` when it fails; the reason is logged at
    ERROR level with an ``issue_kind`` field on the log record. The handler
    keeps no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(PACKAGE_LOGGER_NAME)

    def create_default_settings(self, record_type: type) -> DocumentSettings:
        """Derive settings from a record type's declared columns."""
        return derive_settings(record_type)

    def read_table(
        self,
        source: WorkbookSource,
        settings: DocumentSettings | None = None,
        sheet_index: int = 0,
        stop_on_error: bool = False,
    ) -> Table | None:
        """Read a sheet as a header plus rows of raw cell text."""
        return self._read(
            "read_table",
            source,
            sheet_index,
            stop_on_error,
            lambda sheet, reporter: read_table(sheet, settings, reporter),
        )

    def read_rows(
        self,
        source: WorkbookSource,
        settings: DocumentSettings,
        sheet_index: int = 0,
        stop_on_error: bool = False,
    ) -> Document | None:
        """Read a sheet as rows of cells resolved against ``settings``."""
        return self._read(
            "read_rows",
            source,
            sheet_index,
            stop_on_error,
            lambda sheet, reporter: read_rows(sheet, settings, reporter),
        )

    def read_typed(
        self,
        source: WorkbookSource,
        record_type: type[RecordT],
        mapper: DocumentMapper[RecordT] | None = None,
        sheet_index: int = 0,
        stop_on_error: bool = False,
        settings: DocumentSettings | None = None,
    ) -> list[RecordT] | None:
        """Read a sheet and map its rows to ``record_type`` instances.

        Settings are derived from ``record_type`` unless given. Without a
        ``mapper`` rows are mapped by ``map_document_to_records``.
        """
        resolved_settings = settings or derive_settings(record_type)
        document = self.read_rows(source, resolved_settings, sheet_index, stop_on_error)
        if document is None:
            return None
        if mapper is None:
            return map_document_to_records(document, record_type, resolved_settings)
        return list(mapper(document))

    def write_table(
        self,
        table: Table,
        settings: DocumentSettings | None = None,
        stop_on_error: bool = False,
    ) -> BytesIO | None:
        """Write a table to a new workbook held in memory."""
        reporter = self._reporter("write_table", stop_on_error)
        try:
            return write_table(table, settings, reporter)
        except ValidationAbort:
            return None

    def write_typed(
        self,
        records: Iterable[object],
        settings: DocumentSettings | None = None,
        stop_on_error: bool = False,
        field_accessor: FieldAccessor | None = None,
    ) -> BytesIO | None:
        """Write records to a new workbook held in memory.

        Settings are derived from the first record's type unless given.
        """
        items = list(records)
        resolved_settings = settings
        if resolved_settings is None:
            resolved_settings = derive_settings(type(items[0])) if items else DocumentSettings()
        reporter = self._reporter("write_typed", stop_on_error)
        try:
            return write_records(items, resolved_settings, reporter, field_accessor or read_field)
        except ValidationAbort:
            return None

    def _reporter(self, operation: str, stop_on_error: bool) -> IssueReporter:
        return IssueReporter(self._logger, operation=operation, stop_on_error=stop_on_error)

    def _read(
        self,
        operation: str,
        source: WorkbookSource,
        sheet_index: int,
        stop_on_error: bool,
        read: Callable[[SheetView, IssueReporter], ResultT],
    ) -> ResultT | None:
        reporter = self._reporter(operation, stop_on_error)
        try:
            return _read_sheet(source, sheet_index, reporter, read)
        except ValidationAbort:
            return None


def _read_sheet(
    source: WorkbookSource,
    sheet_index: int,
    reporter: IssueReporter,
    read: Callable[[SheetView, IssueReporter], ResultT],
) -> ResultT:
    try:
        with open_sheet(source, sheet_index) as sheet:
            return read(sheet, reporter)
    except SourceNotFoundError as exc:
        reporter.fail(IssueKind.SOURCE_NOT_FOUND, str(exc))
    except SheetNotFoundError as exc:
        reporter.fail(IssueKind.SHEET_NOT_FOUND, str(exc))
