"""Primary and secondary sort column selection.

Reports are frequently re-sorted by a column the current table does not
carry: a user sorted one report by revenue_per_visit, then opened another
that has no revenue at all. Resolution therefore falls back step by step
instead of failing, and always produces a usable answer.
"""

from __future__ import annotations

import logging

from report_sorter.core.config import MetricsConfig, get_config
from report_sorter.core.types import ColumnId
from report_sorter.datatable.protocols import SortableRow, SortableTable
from report_sorter.datatable.values import ABSENT

logger = logging.getLogger(__name__)


def _has_value(row: SortableRow, column: ColumnId) -> bool:
    return row.get_column(column) is not ABSENT


class ColumnResolver:
    """Resolve which columns a sort pass actually uses.

    Attributes:
        metrics: Metric naming (aliases, default ranking column, label column).

    Example:
        >>> from report_sorter.datatable import DataTable, Row
        >>> resolver = ColumnResolver()
        >>> table = DataTable([Row({"label": "a", 2: 5})])
        >>> resolver.resolve_primary(table, "nb_visits")
        2
        >>> resolver.resolve_secondary(table.get_first_row(), 2)
        'label'

    """

    def __init__(self, metrics: MetricsConfig | None = None) -> None:
        self.metrics = metrics if metrics is not None else get_config().metrics

    def resolve_primary(self, table: SortableTable, requested: ColumnId) -> ColumnId:
        """Select the primary sort column for table.

        Checks, against the first non-summary row: the requested column, the
        numeric index the requested metric name aliases, then the default
        ranking column. When none is present the requested column is kept, so
        the table still records what it was asked to be sorted by.

        Args:
            table: Table to inspect.
            requested: Column the caller asked to sort by.

        Returns:
            The column to sort by.

        """
        rows = table.get_rows_without_summary_row()
        if not rows:
            return requested
        row = rows[0]

        if _has_value(row, requested):
            return requested

        # sorting by "nb_visits" but the table stores it under index 2
        canonical = self.metrics.canonical_column(requested)
        if canonical is not None and _has_value(row, canonical):
            logger.debug("Column %r stored as index %d", requested, canonical)
            return canonical

        default = self.metrics.default_ranking_column
        if _has_value(row, default):
            logger.debug("Column %r not in table, falling back to %r", requested, default)
            return default

        logger.debug("No sortable column for %r, keeping it as nominal sort column", requested)
        return requested

    def resolve_secondary(self, row: SortableRow | None, primary: ColumnId) -> ColumnId | None:
        """Select the tie-break column for a primary column.

        Sorting by the default ranking metric breaks ties by label. Any other
        primary column breaks ties by the default ranking metric (index or
        name), then by label, but never by label twice.

        Args:
            row: Representative row (first non-summary row), or None.
            primary: Resolved primary column.

        Returns:
            The secondary column, or None when no candidate is present.

        """
        if row is None:
            return None

        label = self.metrics.label_column

        if self.metrics.is_default_ranking(primary) and _has_value(row, label):
            return label

        candidates: list[ColumnId] = [
            self.metrics.default_ranking_column,
            self.metrics.default_ranking_name,
        ]
        if primary != label:
            candidates.append(label)

        for column in candidates:
            if _has_value(row, column):
                return column

        return None
