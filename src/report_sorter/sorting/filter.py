"""Sort filter: the public entry point of the sorting engine.

Usage:
    from report_sorter.sorting import configure

    configure("nb_visits", order="desc", recursive_sort=True).apply(table)
    table.get_sorted_by_column()  # "nb_visits"

A filter runs, for the table and then for every sub-table when recursive
sorting is enabled: column resolution, comparison flag inference (once, on
the top-level table), and the multi-key sort. Degenerate input (empty
tables, missing columns, composite values) never raises; the rows simply
keep their order.
"""

from __future__ import annotations

import logging
from collections import deque

from report_sorter.core.config import MetricsConfig, get_config
from report_sorter.core.exceptions import CyclicSubtableError
from report_sorter.core.types import ColumnId, SortOrder
from report_sorter.datatable.protocols import SortableTable
from report_sorter.sorting.columns import ColumnResolver
from report_sorter.sorting.flags import SortFlag, infer_sort_flag
from report_sorter.sorting.sorter import (
    Sorter,
    SortSpec,
    primary_sort_order,
    secondary_sort_order,
)

logger = logging.getLogger(__name__)


class SortFilter:
    """Sorts a table (and optionally its sub-tables) by a column.

    Attributes:
        column_to_sort: Column the caller asked for (name or index).
        order: "asc" or "desc".
        natural_sort: Compare text columns naturally rather than lexicographically.
        recursive_sort: Enable recursive sorting on the table before applying.
        metrics: Metric naming used for column fallback.

    """

    def __init__(
        self,
        column_to_sort: ColumnId | None,
        order: str = "desc",
        natural_sort: bool = True,
        recursive_sort: bool = False,
        metrics: MetricsConfig | None = None,
    ) -> None:
        self.column_to_sort = column_to_sort
        self.natural_sort = natural_sort
        self.recursive_sort = recursive_sort
        self.metrics = metrics if metrics is not None else get_config().metrics
        self.order: SortOrder = "desc"
        self.set_order(order)

    def set_order(self, order: str | None) -> None:
        """Update the order; anything but "asc" means descending."""
        self.order = primary_sort_order(order)

    def apply(self, table: SortableTable) -> None:
        """Sort table in place.

        Sub-tables are sorted too when the table has recursive sorting
        enabled, either beforehand by the caller or through recursive_sort.
        Each sub-table re-resolves its own columns but reuses the comparison
        flag inferred for the top-level table.

        Args:
            table: Table to sort.

        Raises:
            CyclicSubtableError: If a sub-table is reached twice (the table
                tree must be acyclic).

        """
        if table.is_simple():
            return

        if self.column_to_sort is None or self.column_to_sort == "":
            return

        if self.recursive_sort:
            table.enable_recursive_sort()

        resolver = ColumnResolver(self.metrics)
        primary_flag: SortFlag | None = None

        pending: deque[SortableTable] = deque([table])
        visited: set[int] = set()
        while pending:
            current = pending.popleft()
            if id(current) in visited:
                raise CyclicSubtableError(
                    f"Sub-table {current!r} reached twice while sorting by "
                    f"{self.column_to_sort!r}"
                )
            visited.add(id(current))

            if not current.is_simple():
                primary_flag = self._sort_table(current, resolver, primary_flag)

            if not current.is_sort_recursive_enabled():
                continue

            for row in current.get_rows():
                subtable = row.get_subtable()
                if subtable is not None:
                    subtable.enable_recursive_sort()
                    pending.append(subtable)

        logger.debug("Sorted %d table(s) by %r", len(visited), self.column_to_sort)

    def _sort_table(
        self,
        table: SortableTable,
        resolver: ColumnResolver,
        primary_flag: SortFlag | None,
    ) -> SortFlag | None:
        """Resolve columns for one table and sort it.

        Returns:
            The primary flag in effect, to be reused for sub-tables.

        """
        requested = self.column_to_sort
        rows = table.get_rows_without_summary_row()
        if not rows:
            table.set_table_sorted_by(requested)
            return primary_flag

        label = self.metrics.label_column
        primary = resolver.resolve_primary(table, requested)
        if primary_flag is None:
            primary_flag = infer_sort_flag(
                rows,
                primary,
                self.natural_sort,
                requested_column=requested,
                label_column=label,
            )

        # secondary key applies to numeric sorts only
        secondary = None
        if primary_flag is SortFlag.NUMERIC:
            secondary = resolver.resolve_secondary(rows[0], primary)
        secondary_flag = SortFlag.NATURAL
        if secondary is not None:
            secondary_flag = infer_sort_flag(
                rows, secondary, self.natural_sort, label_column=label
            )

        spec = SortSpec(
            primary_column=primary,
            primary_order=self.order,
            primary_flag=primary_flag,
            secondary_column=secondary,
            secondary_order=secondary_sort_order(self.order, secondary, label),
            secondary_flag=secondary_flag,
            sorted_by=requested,
        )
        Sorter(spec).sort(table)
        return primary_flag


def configure(
    column_to_sort: ColumnId | None,
    order: str | None = None,
    natural_sort: bool | None = None,
    recursive_sort: bool | None = None,
    metrics: MetricsConfig | None = None,
) -> SortFilter:
    """Build a sort request, filling unspecified options from configuration.

    Args:
        column_to_sort: Column to sort by (name or index).
        order: "asc" or "desc"; defaults to config.sort.order.
        natural_sort: Natural text comparison; defaults to config.sort.natural_sort.
        recursive_sort: Sort sub-tables too; defaults to config.sort.recursive.
        metrics: Metric naming; defaults to config.metrics.

    Returns:
        A SortFilter ready to apply().

    """
    config = get_config()
    return SortFilter(
        column_to_sort,
        order=order if order is not None else config.sort.order,
        natural_sort=natural_sort if natural_sort is not None else config.sort.natural_sort,
        recursive_sort=(
            recursive_sort if recursive_sort is not None else config.sort.recursive
        ),
        metrics=metrics if metrics is not None else config.metrics,
    )
