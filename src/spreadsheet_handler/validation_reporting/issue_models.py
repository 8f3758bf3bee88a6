"""Validation issue entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueKind(str, Enum):
    """Kind of problem found while reading or writing a sheet."""

    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    SHEET_NOT_FOUND = "SHEET_NOT_FOUND"
    HEADER_CELL_BLANK = "HEADER_CELL_BLANK"
    ROW_HAS_BLANK_CELL = "ROW_HAS_BLANK_CELL"
    REQUIRED_CELL_EMPTY = "REQUIRED_CELL_EMPTY"
    NO_COLUMNS_CONFIGURED = "NO_COLUMNS_CONFIGURED"
    NO_DATA_TO_WRITE = "NO_DATA_TO_WRITE"
    REPEATED_VALUE_NOT_COLLECTION = "REPEATED_VALUE_NOT_COLLECTION"

    @property
    def always_fatal(self) -> bool:
        return self in _ALWAYS_FATAL

    @property
    def never_fatal(self) -> bool:
        return self is IssueKind.REPEATED_VALUE_NOT_COLLECTION


_ALWAYS_FATAL = frozenset(
    {
        IssueKind.SOURCE_NOT_FOUND,
        IssueKind.SHEET_NOT_FOUND,
        IssueKind.NO_COLUMNS_CONFIGURED,
        IssueKind.NO_DATA_TO_WRITE,
    }
)


@dataclass(frozen=True)
class ValidationIssue:
    """One logged issue; ``row`` and ``column`` locate it when known."""

    kind: IssueKind
    message: str
    row: int | None = None
    column: str | None = None


class ValidationAbort(Exception):
    """Raised to end a read or write after an issue that stops the call."""

    def __init__(self, issue: ValidationIssue) -> None:
        super().__init__(issue.message)
        self.issue = issue
