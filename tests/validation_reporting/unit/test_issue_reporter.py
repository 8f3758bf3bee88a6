"""Issue reporter tests."""

from __future__ import annotations

import logging

import pytest
from spreadsheet_handler.validation_reporting import IssueKind, IssueReporter, ValidationAbort

LOGGER_NAME = "tests.validation_reporting"


def _reporter(stop_on_error: bool) -> IssueReporter:
    return IssueReporter(
        logging.getLogger(LOGGER_NAME), operation="read_rows", stop_on_error=stop_on_error
    )


def test_report_logs_error_with_structured_fields(caplog: pytest.LogCaptureFixture) -> None:
    _reporter(stop_on_error=False).report(
        IssueKind.REQUIRED_CELL_EMPTY, "Required cell is empty.", row=3, column="Name"
    )

    [record] = caplog.records
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "read_rows: Required cell is empty."
    assert record.issue_kind == "REQUIRED_CELL_EMPTY"
    assert record.operation == "read_rows"
    assert record.sheet_row == 3
    assert record.sheet_column == "Name"


def test_report_continues_without_stop_on_error(caplog: pytest.LogCaptureFixture) -> None:
    reporter = _reporter(stop_on_error=False)

    reporter.report(IssueKind.ROW_HAS_BLANK_CELL, "blank")
    reporter.report(IssueKind.ROW_HAS_BLANK_CELL, "blank again")

    assert len(caplog.records) == 2


def test_report_aborts_with_stop_on_error(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(ValidationAbort) as excinfo:
        _reporter(stop_on_error=True).report(IssueKind.HEADER_CELL_BLANK, "blank header", row=0)

    assert excinfo.value.issue.kind is IssueKind.HEADER_CELL_BLANK
    assert excinfo.value.issue.row == 0
    assert len(caplog.records) == 1


@pytest.mark.parametrize(
    "kind",
    [
        IssueKind.SOURCE_NOT_FOUND,
        IssueKind.SHEET_NOT_FOUND,
        IssueKind.NO_COLUMNS_CONFIGURED,
        IssueKind.NO_DATA_TO_WRITE,
    ],
)
def test_always_fatal_kinds_abort_regardless_of_policy(kind: IssueKind) -> None:
    with pytest.raises(ValidationAbort):
        _reporter(stop_on_error=False).report(kind, "fatal")


def test_repeated_value_issue_never_aborts(caplog: pytest.LogCaptureFixture) -> None:
    _reporter(stop_on_error=True).report(IssueKind.REPEATED_VALUE_NOT_COLLECTION, "not a list")

    assert caplog.records[0].issue_kind == "REPEATED_VALUE_NOT_COLLECTION"


def test_fail_logs_once_and_raises(caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(ValidationAbort, match="No data to write"):
        _reporter(stop_on_error=False).fail(IssueKind.NO_DATA_TO_WRITE, "No data to write.")

    assert len(caplog.records) == 1
