"""Sheet content exports."""

from .sheet_models import Cell, Document, Row, Table

__all__ = [
    "Cell",
    "Document",
    "Row",
    "Table",
]
