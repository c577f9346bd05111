"""Load and dump report tables as YAML or JSON documents.

Document layout:

    type: default            # or "simple" for a single record of totals
    rows:
      - columns: {label: Chrome, 2: 10}
        subtable:
          rows: [...]
    summary_row:
      columns: {label: Others, 2: 3}

JSON object keys are always strings, so numeric-string column keys are
parsed back to integer indices on load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from report_sorter.core.exceptions import TableLoadError
from report_sorter.core.types import ColumnId, parse_column_id
from report_sorter.datatable.row import Row
from report_sorter.datatable.table import DataTable, SimpleDataTable

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _parse_column_key(key: Any) -> ColumnId:
    if isinstance(key, bool) or not isinstance(key, int | str):
        raise TableLoadError(f"Column keys must be names or indices, got {key!r}")
    if isinstance(key, str):
        return parse_column_id(key)
    return key


def _row_from_dict(data: Any, path: str, file_path: Path | None) -> Row:
    if not isinstance(data, dict):
        raise TableLoadError(
            f"{path} must be a mapping, got {type(data).__name__}", file_path=file_path
        )

    columns = data.get("columns", {})
    if not isinstance(columns, dict):
        raise TableLoadError(
            f"{path}.columns must be a mapping, got {type(columns).__name__}",
            file_path=file_path,
        )

    try:
        parsed = {_parse_column_key(key): value for key, value in columns.items()}
    except TableLoadError as e:
        raise TableLoadError(f"{path}.columns: {e}", file_path=file_path) from e

    subtable = None
    if data.get("subtable") is not None:
        subtable = _table_from_dict(data["subtable"], f"{path}.subtable", file_path)

    return Row(parsed, subtable=subtable)


def _table_from_dict(data: Any, path: str, file_path: Path | None) -> DataTable:
    if not isinstance(data, dict):
        raise TableLoadError(
            f"{path} must be a mapping, got {type(data).__name__}", file_path=file_path
        )

    table_type = data.get("type", "default")
    if table_type not in ("default", "simple"):
        raise TableLoadError(f"{path}.type must be 'default' or 'simple'", file_path=file_path)

    rows_data = data.get("rows", [])
    if not isinstance(rows_data, list):
        raise TableLoadError(
            f"{path}.rows must be a list, got {type(rows_data).__name__}",
            file_path=file_path,
        )

    rows = [
        _row_from_dict(row_data, f"{path}.rows[{idx}]", file_path)
        for idx, row_data in enumerate(rows_data)
    ]

    summary_row = None
    if data.get("summary_row") is not None:
        summary_row = _row_from_dict(data["summary_row"], f"{path}.summary_row", file_path)

    table_cls = SimpleDataTable if table_type == "simple" else DataTable
    return table_cls(rows, summary_row=summary_row)


def table_from_dict(data: Any, file_path: Path | None = None) -> DataTable:
    """Build a table tree from a parsed document.

    Args:
        data: Parsed YAML/JSON document.
        file_path: Source path, used in error messages only.

    Returns:
        The root table.

    Raises:
        TableLoadError: If the document does not follow the table layout.

    """
    return _table_from_dict(data, "table", file_path)


def load_table(path: Path) -> DataTable:
    """Load a table tree from a YAML or JSON file.

    The format is chosen by file suffix; unknown suffixes are parsed as YAML,
    which also accepts JSON.

    Raises:
        TableLoadError: If the file is unreadable, unparsable or malformed.

    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TableLoadError(f"Cannot read table file: {e}", file_path=path) from e

    try:
        if path.suffix.lower() in JSON_SUFFIXES:
            data = json.loads(text)
        else:
            if path.suffix.lower() not in YAML_SUFFIXES:
                logger.debug("Unknown table suffix %r, parsing as YAML", path.suffix)
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TableLoadError(f"Invalid table document: {e}", file_path=path) from e

    if data is None:
        raise TableLoadError("Table document is empty", file_path=path)

    return table_from_dict(data, file_path=path)


def _row_to_dict(row: Row) -> dict[str, Any]:
    result: dict[str, Any] = {"columns": row.get_columns()}
    subtable = row.get_subtable()
    if subtable is not None:
        result["subtable"] = table_to_dict(subtable)
    return result


def table_to_dict(table: DataTable) -> dict[str, Any]:
    """Dump a table tree to a plain document (inverse of table_from_dict)."""
    result: dict[str, Any] = {}
    if table.is_simple():
        result["type"] = "simple"
    result["rows"] = [_row_to_dict(row) for row in table.get_rows_without_summary_row()]
    summary_row = table.get_summary_row()
    if summary_row is not None:
        result["summary_row"] = _row_to_dict(summary_row)
    sorted_by = table.get_sorted_by_column()
    if sorted_by is not None:
        result["sorted_by"] = sorted_by
    return result
