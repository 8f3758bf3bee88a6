"""Sheet content entities produced by reads and consumed by writes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """One mapped data cell of a typed read."""

    column_name: str
    field_id: str | None
    value: str
    required: bool


@dataclass(frozen=True)
class Row:
    """One data row.

    ``number`` is the sheet row number counted from the header row as 1, so the
    first data row is 2.
    """

    number: int
    cells: tuple[Cell, ...]

    def values_for(self, field_id: str) -> tuple[str, ...]:
        """Return every cell value mapped to a field, in column order."""
        return tuple(cell.value for cell in self.cells if cell.field_id == field_id)


@dataclass(frozen=True)
class Document:
    """Result of a typed read."""

    rows: tuple[Row, ...]


@dataclass(frozen=True)
class Table:
    """Fixed-width matrix of string cells under a header row.

    Short rows are padded with empty strings; a row wider than the header
    raises ``ValueError``.
    """

    column_names: Sequence[str]
    rows: Sequence[Sequence[str | None]] = ()

    def __post_init__(self) -> None:
        width = len(self.column_names)
        normalized_rows: list[tuple[str, ...]] = []
        for position, row in enumerate(self.rows):
            values = ["" if value is None else str(value) for value in row]
            if len(values) > width:
                raise ValueError(
                    f"Row {position} has {len(values)} cells but the table has {width} columns."
                )
            values.extend("" for _ in range(width - len(values)))
            normalized_rows.append(tuple(values))
        object.__setattr__(self, "column_names", tuple(self.column_names))
        object.__setattr__(self, "rows", tuple(normalized_rows))

    def column(self, column_name: str) -> tuple[str, ...]:
        """Return the values of one column; raises ``KeyError`` for unknown names."""
        try:
            index = self.column_names.index(column_name)
        except ValueError as exc:
            raise KeyError(column_name) from exc
        return tuple(row[index] for row in self.rows)

    def as_dicts(self) -> list[dict[str, str]]:
        return [dict(zip(self.column_names, row, strict=True)) for row in self.rows]
