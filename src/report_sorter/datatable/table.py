"""Report table container.

A DataTable is an ordered list of rows plus an optional summary row that
aggregates everything truncated away ("Others"). The summary row is stored
apart from the regular rows, so reordering never touches it and
get_rows() always yields it last.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from report_sorter.core.types import ColumnId
from report_sorter.datatable.row import Row

logger = logging.getLogger(__name__)


class DataTable:
    """Ordered collection of report rows.

    Attributes are private; the sorting engine only goes through the
    accessor methods, which form the contract described by
    report_sorter.datatable.protocols.SortableTable.

    Example:
        >>> table = DataTable([Row({"label": "a", 2: 1})])
        >>> table.get_row_count()
        1

    """

    def __init__(
        self,
        rows: Iterable[Row] | None = None,
        summary_row: Row | None = None,
    ) -> None:
        self._rows: list[Row] = list(rows or [])
        self._summary_row = summary_row
        self._sort_recursive = False
        self._sorted_by: ColumnId | None = None

    def get_rows_without_summary_row(self) -> list[Row]:
        return list(self._rows)

    def get_rows(self) -> list[Row]:
        """Return all rows, the summary row (if any) last."""
        if self._summary_row is None:
            return list(self._rows)
        return [*self._rows, self._summary_row]

    def get_first_row(self) -> Row | None:
        """Return the first non-summary row, or None for an empty table."""
        return self._rows[0] if self._rows else None

    def set_rows(self, rows: Iterable[Row]) -> None:
        """Replace the regular rows; the summary row is kept."""
        self._rows = list(rows)

    def add_row(self, row: Row) -> None:
        self._rows.append(row)

    def get_row_count(self) -> int:
        """Number of regular rows (summary row excluded)."""
        return len(self._rows)

    def get_summary_row(self) -> Row | None:
        return self._summary_row

    def set_summary_row(self, row: Row | None) -> None:
        self._summary_row = row

    def enable_recursive_sort(self) -> None:
        self._sort_recursive = True

    def is_sort_recursive_enabled(self) -> bool:
        return self._sort_recursive

    def set_table_sorted_by(self, column: ColumnId | None) -> None:
        logger.debug("Table %#x sorted by %r", id(self), column)
        self._sorted_by = column

    def get_sorted_by_column(self) -> ColumnId | None:
        return self._sorted_by

    def is_simple(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        summary = ", summary" if self._summary_row is not None else ""
        return f"{type(self).__name__}(rows={len(self._rows)}{summary})"


class SimpleDataTable(DataTable):
    """Table holding a single record of totals.

    There is nothing to order in such a table, so the sort filter skips it.
    """

    def is_simple(self) -> bool:
        return True
