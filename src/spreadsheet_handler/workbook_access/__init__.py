"""Workbook access exports."""

from .cell_rendering import cell_text, is_blank_value
from .workbook_sink import build_workbook
from .workbook_source import (
    SheetCell,
    SheetNotFoundError,
    SheetRow,
    SheetView,
    SourceNotFoundError,
    WorkbookAccessError,
    WorkbookSource,
    open_sheet,
)

__all__ = [
    "SheetCell",
    "SheetNotFoundError",
    "SheetRow",
    "SheetView",
    "SourceNotFoundError",
    "WorkbookAccessError",
    "WorkbookSource",
    "build_workbook",
    "cell_text",
    "is_blank_value",
    "open_sheet",
]
