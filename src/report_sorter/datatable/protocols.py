"""Table and row contracts consumed by the sorting engine.

The engine is written against these protocols rather than the concrete
DataTable/Row classes, so any table implementation exposing the same
accessors can be sorted in place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from report_sorter.core.types import ColumnId


class SortableRow(Protocol):
    """Protocol for rows the engine can read.

    get_column() must return report_sorter.datatable.values.ABSENT for a
    missing column so that "missing" stays distinct from a stored None.
    """

    def get_column(self, column: ColumnId) -> Any: ...

    def get_subtable(self) -> SortableTable | None: ...


class SortableTable(Protocol):
    """Protocol for tables the engine can reorder."""

    def get_rows_without_summary_row(self) -> Sequence[SortableRow]: ...

    def get_rows(self) -> Sequence[SortableRow]: ...

    def set_rows(self, rows: Sequence[SortableRow]) -> None: ...

    def enable_recursive_sort(self) -> None: ...

    def is_sort_recursive_enabled(self) -> bool: ...

    def set_table_sorted_by(self, column: ColumnId | None) -> None: ...

    def is_simple(self) -> bool: ...
