"""Validation reporting exports."""

from .issue_models import IssueKind, ValidationAbort, ValidationIssue
from .issue_reporter import IssueReporter

__all__ = [
    "IssueKind",
    "IssueReporter",
    "ValidationAbort",
    "ValidationIssue",
]
