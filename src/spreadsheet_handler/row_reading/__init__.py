"""Row reading exports."""

from .row_reader import read_rows

__all__ = ["read_rows"]
