"""Read-side workbook access."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .cell_rendering import cell_text, is_blank_value

WorkbookSource = Path | str | BinaryIO


class WorkbookAccessError(Exception):
    """Raised when a workbook or one of its sheets cannot be opened."""


class SourceNotFoundError(WorkbookAccessError):
    """Raised when the workbook source is missing or unreadable."""


class SheetNotFoundError(WorkbookAccessError):
    """Raised when the requested sheet index does not exist."""


@dataclass(frozen=True)
class SheetCell:
    """One physical cell; ``column_index`` is zero-based."""

    column_index: int
    value: object

    @property
    def is_blank(self) -> bool:
        return is_blank_value(self.value)

    @property
    def text(self) -> str:
        return cell_text(self.value)


@dataclass(frozen=True)
class SheetRow:
    """One physical row; ``index`` is zero-based and trailing empty cells are trimmed."""

    index: int
    cells: tuple[SheetCell, ...]

    @classmethod
    def from_values(cls, index: int, values: Sequence[object]) -> SheetRow:
        width = len(values)
        while width and values[width - 1] is None:
            width -= 1
        cells = tuple(
            SheetCell(column_index=position, value=values[position]) for position in range(width)
        )
        return cls(index=index, cells=cells)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def cell(self, column_index: int) -> SheetCell | None:
        if 0 <= column_index < len(self.cells):
            return self.cells[column_index]
        return None

    def has_blank_cell(self, width: int | None = None) -> bool:
        """Return whether the row has a blank cell.

        With ``width`` only the first ``width`` columns are inspected, and
        columns the row does not reach count as blank.
        """
        if width is None:
            return any(cell.is_blank for cell in self.cells)
        if len(self.cells) < width:
            return True
        return any(cell.is_blank for cell in self.cells[:width])


class SheetView:
    """Row access for one selected worksheet."""

    def __init__(self, worksheet, sheet_index: int) -> None:
        self._worksheet = worksheet
        self.sheet_index = sheet_index

    @property
    def title(self) -> str:
        return self._worksheet.title

    def rows(self) -> Iterator[SheetRow]:
        for index, values in enumerate(self._worksheet.iter_rows(values_only=True)):
            yield SheetRow.from_values(index, values)


@contextmanager
def open_sheet(source: WorkbookSource, sheet_index: int = 0) -> Iterator[SheetView]:
    """Open a workbook and select one sheet by zero-based index.

    The workbook is closed when the context exits, on every path.

    Raises:
      SourceNotFoundError: If the file is missing or is not a readable workbook.
      SheetNotFoundError: If ``sheet_index`` is out of range.
    """
    workbook = _load_workbook(source)
    try:
        worksheets = workbook.worksheets
        if not 0 <= sheet_index < len(worksheets):
            raise SheetNotFoundError(
                f"Sheet index {sheet_index} is out of range; "
                f"workbook has {len(worksheets)} sheet(s)."
            )
        yield SheetView(worksheets[sheet_index], sheet_index)
    finally:
        workbook.close()


def _load_workbook(source: WorkbookSource):
    if isinstance(source, str | Path):
        path = Path(source)
        if not path.is_file():
            raise SourceNotFoundError(f"Workbook file not found: {path}")
        source = path
    try:
        return load_workbook(source, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise SourceNotFoundError(f"Workbook could not be read: {exc}") from exc
