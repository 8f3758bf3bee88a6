"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from spreadsheet_handler.column_settings import DocumentSettings
from spreadsheet_handler.configuration import (
    DEFAULT_SETTINGS_FILENAME,
    ConfigurationError,
    load_settings,
    write_placeholder_settings,
)
from spreadsheet_handler.handler import PACKAGE_LOGGER_NAME, SpreadsheetHandler
from spreadsheet_handler.sheet_contents import Table

CLI_LOGGER_NAME = f"{PACKAGE_LOGGER_NAME}.cli"


class CliError(Exception):
    """Custom CLI error."""


class _ClickEchoHandler(logging.Handler):
    """Log handler writing through click so output follows the active stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        click.echo(self.format(record), err=True)


def _cli_logger() -> logging.Logger:
    logger = logging.getLogger(CLI_LOGGER_NAME)
    if not any(isinstance(handler, _ClickEchoHandler) for handler in logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger


def _handler() -> SpreadsheetHandler:
    return SpreadsheetHandler(logger=_cli_logger())


def _optional_settings(settings_path: str | None) -> DocumentSettings | None:
    if settings_path is None:
        return None
    return _load_cli_settings(settings_path)


def _load_cli_settings(settings_path: str) -> DocumentSettings:
    try:
        return load_settings(settings_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _emit_json(payload: Any, output_path: str | None) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")
    click.echo(str(destination.resolve()))


def _load_table(input_path: str) -> Table:
    try:
        payload = json.loads(Path(input_path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CliError(f"Failed to read table file: {exc}") from exc
    if not isinstance(payload, dict):
        raise CliError("Table file root must be an object.")
    column_names = payload.get("column_names")
    rows = payload.get("rows", [])
    if not isinstance(column_names, list) or not isinstance(rows, list):
        raise CliError("Table file requires a 'column_names' list and a 'rows' list.")
    if any(not isinstance(row, list) for row in rows):
        raise CliError("Table file rows must be lists of cell values.")
    try:
        return Table(column_names=[str(name) for name in column_names], rows=rows)
    except ValueError as exc:
        raise CliError(str(exc)) from exc


_sheet_option = click.option(
    "--sheet",
    "sheet_index",
    default=0,
    show_default=True,
    type=click.IntRange(min=0),
    help="Zero-based index of the sheet to read",
)
_stop_option = click.option(
    "--stop-on-error",
    is_flag=True,
    default=False,
    help="Stop at the first validation error instead of logging and continuing.",
)
_json_output_option = click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the JSON result; printed to stdout otherwise",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="spreadsheet-handler")
def cli() -> None:
    """Settings-driven spreadsheet import/export utility."""


@cli.command(name="generate-settings")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_settings(output_path: str) -> None:
    """Generate a placeholder YAML settings file with guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="read-table")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the workbook to read",
)
@click.option(
    "--settings",
    "settings_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON settings file with empty-cell and required-column rules",
)
@_sheet_option
@_stop_option
@_json_output_option
def read_table_command(
    input_path: str,
    settings_path: str | None,
    sheet_index: int,
    stop_on_error: bool,
    output_path: str | None,
) -> None:
    """Read a sheet as a plain table and print it as JSON."""
    settings = _optional_settings(settings_path)
    table = _handler().read_table(input_path, settings, sheet_index, stop_on_error)
    if table is None:
        raise CliError("No table was read; see the logged errors.")
    _emit_json(
        {"column_names": list(table.column_names), "rows": [list(row) for row in table.rows]},
        output_path,
    )


@cli.command(name="read-rows")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the workbook to read",
)
@click.option(
    "--settings",
    "settings_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON settings file describing the columns",
)
@_sheet_option
@_stop_option
@_json_output_option
def read_rows_command(
    input_path: str,
    settings_path: str,
    sheet_index: int,
    stop_on_error: bool,
    output_path: str | None,
) -> None:
    """Read a sheet as rows of mapped cells and print them as JSON."""
    settings = _load_cli_settings(settings_path)
    document = _handler().read_rows(input_path, settings, sheet_index, stop_on_error)
    if document is None:
        raise CliError("No rows were read; see the logged errors.")
    _emit_json(dataclasses.asdict(document), output_path)


@cli.command(name="write-table")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON file with 'column_names' and 'rows'",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the workbook to write",
)
@click.option(
    "--settings",
    "settings_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON settings file with required-column rules",
)
@_stop_option
def write_table_command(
    input_path: str, output_path: str, settings_path: str | None, stop_on_error: bool
) -> None:
    """Write a JSON table to a workbook."""
    table = _load_table(input_path)
    settings = _optional_settings(settings_path)
    buffer = _handler().write_table(table, settings, stop_on_error)
    if buffer is None:
        raise CliError("No workbook was written; see the logged errors.")
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(buffer.getvalue())
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
