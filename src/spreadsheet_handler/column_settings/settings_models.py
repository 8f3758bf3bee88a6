"""Column settings entities."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ColumnDefinition:
    """Correspondence between one record field and one spreadsheet column."""

    column_name: str
    field_id: str | None = None
    required: bool = False
    repeated: bool = False

    def matches(self, header_name: str) -> bool:
        """Return whether a header cell text refers to this column."""
        return self.column_name.lower() == header_name.lower()


@dataclass(frozen=True)
class DocumentSettings:
    """Per-document mapping settings."""

    allow_empty_cells: bool = False
    repeated_from_column: int | None = None
    columns: tuple[ColumnDefinition, ...] = ()
    included_columns: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "included_columns", frozenset(self.included_columns))
        repeated_positions = [
            index for index, column in enumerate(self.columns) if column.repeated
        ]
        if len(repeated_positions) > 1:
            raise ValueError("Only one column may be marked as repeated.")
        if repeated_positions and repeated_positions[0] != len(self.columns) - 1:
            raise ValueError("The repeated column must be the last column definition.")

    @property
    def repeats_trailing_columns(self) -> bool:
        return self.repeated_from_column is not None and self.repeated_from_column > 0

    def find_column(self, header_name: str) -> ColumnDefinition | None:
        """Return the first definition matching the header name, ignoring case."""
        for column in self.columns:
            if column.matches(header_name):
                return column
        return None

    def repeated_column(self) -> ColumnDefinition | None:
        for column in self.columns:
            if column.repeated:
                return column
        return None

    def is_required_column(self, header_name: str) -> bool:
        return any(column.required and column.matches(header_name) for column in self.columns)

    def applying_included_columns(self) -> DocumentSettings:
        """Return settings restricted to the included columns.

        An empty inclusion set keeps every column.
        """
        if not self.included_columns:
            return self
        included = {name.lower() for name in self.included_columns}
        kept = tuple(column for column in self.columns if column.column_name.lower() in included)
        return replace(self, columns=kept)
