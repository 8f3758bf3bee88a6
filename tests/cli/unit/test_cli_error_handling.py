"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from spreadsheet_handler.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["read-rows", "--input", "/tmp/in.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--settings" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["read-table", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_workbook_logs_issue_and_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["read-table", "--input", str(tmp_path / "missing.xlsx")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "ERROR read_table: Workbook file not found" in captured.err
    assert "No table was read" in captured.err
    assert captured.out == ""


def test_invalid_settings_file_returns_error(tmp_path: Path, capsys) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("allow_empty_cells: maybe\n", encoding="utf-8")

    exit_code = main(
        ["read-rows", "--input", str(tmp_path / "in.xlsx"), "--settings", str(settings_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "allow_empty_cells must be true or false" in captured.err


def test_invalid_table_file_returns_error(tmp_path: Path, capsys) -> None:
    table_path = tmp_path / "table.json"
    table_path.write_text('{"rows": []}', encoding="utf-8")

    exit_code = main(
        ["write-table", "--input", str(table_path), "--output", str(tmp_path / "out.xlsx")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "'column_names' list" in captured.err


def test_generate_settings_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "settings.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-settings", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_table_row_wider_than_header_returns_error(tmp_path: Path, capsys) -> None:
    table_path = tmp_path / "table.json"
    table_path.write_text('{"column_names": ["Name"], "rows": [["Ada", "x"]]}', encoding="utf-8")

    exit_code = main(
        ["write-table", "--input", str(table_path), "--output", str(tmp_path / "out.xlsx")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Row 0 has 2 cells but the table has 1 columns" in captured.err
    assert not (tmp_path / "out.xlsx").exists()
