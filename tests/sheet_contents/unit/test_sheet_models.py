"""Sheet content entity tests."""

from __future__ import annotations

import pytest
from spreadsheet_handler.sheet_contents import Cell, Row, Table


def test_table_pads_short_rows_and_renders_missing_values_as_empty() -> None:
    table = Table(column_names=["Name", "City", "Zip"], rows=[["Ada", None]])

    assert table.column_names == ("Name", "City", "Zip")
    assert table.rows == (("Ada", "", ""),)


def test_table_rejects_rows_wider_than_the_header() -> None:
    with pytest.raises(ValueError, match="Row 1 has 3 cells but the table has 2 columns"):
        Table(column_names=["Name", "City"], rows=[["Ada", "Leeds"], ["Alan", "London", "x"]])


def test_table_column_and_dict_views() -> None:
    table = Table(column_names=["Name", "City"], rows=[["Ada", "Leeds"], ["Alan", "London"]])

    assert table.column("City") == ("Leeds", "London")
    assert table.as_dicts()[0] == {"Name": "Ada", "City": "Leeds"}
    with pytest.raises(KeyError):
        table.column("Zip")


def test_row_values_for_collects_cells_of_one_field_in_order() -> None:
    row = Row(
        number=2,
        cells=(
            Cell(column_name="Name", field_id="name", value="Ada", required=True),
            Cell(column_name="Phone", field_id="phones", value="0113", required=False),
            Cell(column_name="Phone", field_id="phones", value="0114", required=False),
        ),
    )

    assert row.values_for("phones") == ("0113", "0114")
    assert row.values_for("city") == ()
