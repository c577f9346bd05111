"""Report table row."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from report_sorter.core.types import ColumnId
from report_sorter.datatable.values import ABSENT

if TYPE_CHECKING:
    from report_sorter.datatable.table import DataTable


class Row:
    """A single report row: column values plus an optional nested sub-table.

    Columns are keyed by metric name or numeric index. A row owns its
    sub-table; the sorter discovers sub-tables through get_subtable() and
    never creates them.

    Example:
        >>> row = Row({"label": "Chrome", 2: 10})
        >>> row.get_column(2)
        10
        >>> row.get_column("nb_actions")
        ABSENT

    """

    __slots__ = ("_columns", "_subtable")

    def __init__(
        self,
        columns: Mapping[ColumnId, Any] | None = None,
        subtable: DataTable | None = None,
    ) -> None:
        self._columns: dict[ColumnId, Any] = dict(columns or {})
        self._subtable = subtable

    def get_column(self, column: ColumnId) -> Any:
        """Return the value of column, or ABSENT when the row lacks it."""
        return self._columns.get(column, ABSENT)

    def set_column(self, column: ColumnId, value: Any) -> None:
        self._columns[column] = value

    def delete_column(self, column: ColumnId) -> None:
        self._columns.pop(column, None)

    def has_column(self, column: ColumnId) -> bool:
        return column in self._columns

    def get_columns(self) -> dict[ColumnId, Any]:
        """Return a copy of all column values."""
        return dict(self._columns)

    def get_subtable(self) -> DataTable | None:
        return self._subtable

    def set_subtable(self, subtable: DataTable | None) -> None:
        self._subtable = subtable

    def remove_subtable(self) -> None:
        self._subtable = None

    def __iter__(self) -> Iterator[ColumnId]:
        return iter(self._columns)

    def __repr__(self) -> str:
        suffix = ", subtable=..." if self._subtable is not None else ""
        return f"Row({self._columns!r}{suffix})"
