"""Settings scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from spreadsheet_handler.configuration import (
    build_placeholder_settings,
    load_settings,
    write_placeholder_settings,
)


def test_build_placeholder_settings_documents_every_key() -> None:
    scaffold = build_placeholder_settings()

    assert "allow_empty_cells:" in scaffold
    assert "repeated_from_column" in scaffold
    assert "columns:" in scaffold
    assert "included_columns:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_placeholder_settings_parse_as_yaml_mapping() -> None:
    parsed = yaml.safe_load(build_placeholder_settings())

    assert isinstance(parsed, dict)
    assert parsed["columns"][0]["required"] is True


def test_write_placeholder_settings_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "settings.yaml"

    written_path = write_placeholder_settings(output_path)

    assert written_path == output_path.resolve()
    settings = load_settings(output_path)
    assert settings.columns[0].column_name == "<REQUIRED>"


def test_write_placeholder_settings_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "settings.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_settings(output_path)
