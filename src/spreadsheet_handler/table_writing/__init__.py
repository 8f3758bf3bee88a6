"""Table writing exports."""

from .record_writer import FieldAccessor, read_field, write_records
from .table_writer import write_table

__all__ = [
    "FieldAccessor",
    "read_field",
    "write_records",
    "write_table",
]
