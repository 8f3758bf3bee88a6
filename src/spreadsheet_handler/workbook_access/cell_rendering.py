"""Textual rendering of spreadsheet cell values."""

from __future__ import annotations

from datetime import date, datetime, time


def cell_text(value: object) -> str:
    """Render a cell value the way it reads in a spreadsheet."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time.min:
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, date | time):
        return value.isoformat()
    return str(value)


def is_blank_value(value: object) -> bool:
    return value is None or value == ""
