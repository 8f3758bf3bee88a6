"""Issue logging and abort policy."""

from __future__ import annotations

import logging
from typing import NoReturn

from .issue_models import IssueKind, ValidationAbort, ValidationIssue


class IssueReporter:
    """Logs issues for one read or write call and decides whether it stops.

    Every issue is logged at ERROR severity with the issue kind and location in
    the record's ``extra`` fields. ``ValidationAbort`` is raised when the kind is
    always fatal, or when ``stop_on_error`` is set and the kind is not one that
    is only ever logged.
    """

    def __init__(self, logger: logging.Logger, *, operation: str, stop_on_error: bool) -> None:
        self._logger = logger
        self.operation = operation
        self.stop_on_error = stop_on_error

    def report(
        self,
        kind: IssueKind,
        message: str,
        *,
        row: int | None = None,
        column: str | None = None,
    ) -> None:
        issue = ValidationIssue(kind=kind, message=message, row=row, column=column)
        self._logger.error(
            "%s: %s",
            self.operation,
            message,
            extra={
                "issue_kind": kind.value,
                "operation": self.operation,
                "sheet_row": row,
                "sheet_column": column,
            },
        )
        if kind.never_fatal:
            return
        if kind.always_fatal or self.stop_on_error:
            raise ValidationAbort(issue)

    def fail(self, kind: IssueKind, message: str) -> NoReturn:
        """Log an issue and stop the call whatever the stop policy."""
        self.report(kind, message)
        raise ValidationAbort(ValidationIssue(kind=kind, message=message))
