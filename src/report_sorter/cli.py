"""Command line interface for report-sorter.

Examples:
    report-sorter sort report.yaml                      # by nb_visits, descending
    report-sorter sort report.json -c revenue -o asc    # by revenue, ascending
    report-sorter sort report.yaml -c label -r -f yaml  # recursive, YAML output

"""

import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.table import Table

from report_sorter import __version__
from report_sorter.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _setup_logging,
    _validate_input_path,
    _warning,
    console,
)
from report_sorter.core.config import load_config, load_global_config
from report_sorter.core.exceptions import ConfigError, TableLoadError
from report_sorter.core.types import ColumnId, column_id_label, parse_column_id
from report_sorter.datatable import DataTable, load_table, table_to_dict
from report_sorter.metrics import DEFAULT_RANKING_NAME, LABEL_COLUMN, get_mapping_from_id_to_name
from report_sorter.sorting import configure

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "yaml", "json")

app = typer.Typer(
    name="report-sorter",
    help="Sort hierarchical report tables by a metric column",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"report-sorter {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Sort hierarchical report tables by a metric column."""


def _collect_columns(table: DataTable, columns: list[ColumnId]) -> None:
    for row in table.get_rows():
        for column in row:
            if column not in columns:
                columns.append(column)
        subtable = row.get_subtable()
        if subtable is not None:
            _collect_columns(subtable, columns)


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list | tuple | dict | set):
        return json.dumps(value, default=str)
    return str(value)


def _add_rows(
    rich_table: Table,
    table: DataTable,
    columns: list[ColumnId],
    depth: int,
) -> None:
    summary_row = table.get_summary_row()
    for row in table.get_rows():
        cells = [_format_cell(row.get_columns().get(column)) for column in columns]
        if cells and columns[0] == LABEL_COLUMN:
            cells[0] = "  " * depth + cells[0]
        rich_table.add_row(*cells, style="dim" if row is summary_row else None)
        subtable = row.get_subtable()
        if subtable is not None:
            _add_rows(rich_table, subtable, columns, depth + 1)


def render_table(table: DataTable) -> Table:
    """Render a table tree as a Rich table, sub-table rows indented under their parent."""
    columns: list[ColumnId] = []
    _collect_columns(table, columns)
    if LABEL_COLUMN in columns:
        columns.remove(LABEL_COLUMN)
        columns.insert(0, LABEL_COLUMN)

    # index columns are shown by metric name
    names = get_mapping_from_id_to_name()
    rich_table = Table(title=f"Sorted by {column_id_label(table.get_sorted_by_column())}")
    for column in columns:
        rich_table.add_column(
            names.get(column, column_id_label(column)),
            justify="left" if column == LABEL_COLUMN else "right",
        )
    _add_rows(rich_table, table, columns, depth=0)
    return rich_table


def _activate_config(config: str | None) -> None:
    if config is None:
        load_global_config()
    else:
        load_config(Path(config).expanduser())


@app.command("sort")
def sort_command(
    path: str = typer.Argument(..., help="Table document (YAML or JSON)"),
    column: str = typer.Option(
        DEFAULT_RANKING_NAME,
        "--column",
        "-c",
        help="Column to sort by: metric name or numeric index",
    ),
    order: str | None = typer.Option(
        None,
        "--order",
        "-o",
        help="Sort order: asc or desc (default from config)",
    ),
    lexicographic: bool = typer.Option(
        False,
        "--lexicographic",
        help="Compare text lexicographically (img10 < img2) instead of naturally",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Sort nested sub-tables as well",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table, yaml or json",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Path to a report-sorter YAML config",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
) -> None:
    """Sort a report table document and print the result.

    Missing columns fall back to the default ranking column, rows without a
    value go last, and ties are broken by label or visit count.

    """
    _setup_logging(verbose=verbose, quiet=quiet)

    if output_format not in OUTPUT_FORMATS:
        _error(f"Unknown format '{output_format}'. Valid options: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(code=EXIT_ERROR)

    table_path = _validate_input_path(path)

    try:
        _activate_config(config)
    except ConfigError as e:
        _error(f"Config error: {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    try:
        table = load_table(table_path)
    except TableLoadError as e:
        _error(str(e))
        if verbose:
            console.print_exception()
        raise typer.Exit(code=EXIT_ERROR) from None

    if table.is_simple():
        _warning("Table holds a single record of totals, leaving it unsorted")

    configure(
        parse_column_id(column.strip()),
        order=order,
        natural_sort=False if lexicographic else None,
        recursive_sort=True if recursive else None,
    ).apply(table)
    logger.debug("Sorted %s by %r", table_path, column)

    if output_format == "table":
        console.print(render_table(table))
    elif output_format == "yaml":
        typer.echo(yaml.safe_dump(table_to_dict(table), sort_keys=False, allow_unicode=True))
    else:
        typer.echo(json.dumps(table_to_dict(table), indent=2, ensure_ascii=False, default=str))

