"""Table reading exports."""

from .table_reader import read_table

__all__ = ["read_table"]
