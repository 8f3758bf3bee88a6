"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "spreadsheet-settings.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Column settings for spreadsheet-handler.
# Column names are matched against header cells without regard to case.

# Set to true when data rows may contain blank cells.
allow_empty_cells: false

# Zero-based column index from which trailing columns repeat the column
# marked "repeated: true". Leave unset when no column repeats.
# repeated_from_column: 5

columns:
  - column_name: "<REQUIRED>"
    field_id: "<OPTIONAL>"
    required: true
  # - column_name: "<OPTIONAL>"
  #   field_id: "<OPTIONAL>"
  #   repeated: true  # only allowed on the last column

# Restrict written columns to these names. An empty list writes every column.
included_columns: []
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with placeholders and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the placeholder settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
