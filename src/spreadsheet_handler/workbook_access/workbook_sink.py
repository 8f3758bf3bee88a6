"""Write-side workbook access."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from io import BytesIO

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet


def build_workbook(rows: Iterable[Sequence[str]], sheet_title: str | None = None) -> BytesIO:
    """Write rows of strings into a fresh single-sheet workbook.

    Returns:
      An in-memory ``.xlsx`` document positioned at its start.
    """
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    if sheet_title:
        sheet.title = sheet_title

    for row in rows:
        sheet.append(list(row))

    buffer = BytesIO()
    workbook.save(buffer)
    buffer.seek(0)
    return buffer
