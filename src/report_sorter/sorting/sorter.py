"""Multi-key row ordering for a single table.

Rows that have a usable primary value are sorted and placed first; rows
without one always go last, whatever the direction. Ties on the primary
value are broken by an optional secondary column.

Keys are applied from lowest precedence to highest with Python's stable
sort: first the secondary key, then the primary key. Equal composite keys
therefore keep their input order, which also makes re-sorting an already
sorted table a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import itemgetter
from typing import Any

from report_sorter.core.types import ColumnId, SortOrder, normalize_sort_order
from report_sorter.datatable.protocols import SortableRow, SortableTable
from report_sorter.datatable.values import is_sortable
from report_sorter.metrics import LABEL_COLUMN
from report_sorter.sorting.flags import SortFlag, sort_key_for

logger = logging.getLogger(__name__)


def primary_sort_order(order: str | None) -> SortOrder:
    """Return the primary order; anything but "asc" is descending."""
    return normalize_sort_order(order)


def secondary_sort_order(
    order: str | None,
    secondary_column: ColumnId | None,
    label_column: str = LABEL_COLUMN,
) -> SortOrder:
    """Return the order for the tie-break column.

    Labels run against the primary direction so that, for example, rows with
    equal visit counts sorted descending still read A to Z. Any other
    secondary column follows the primary direction.

    Examples:
        >>> secondary_sort_order("desc", "label")
        'asc'
        >>> secondary_sort_order("asc", "label")
        'desc'
        >>> secondary_sort_order("desc", 2)
        'desc'

    """
    primary = primary_sort_order(order)
    if secondary_column == label_column:
        return "desc" if primary == "asc" else "asc"
    return primary


@dataclass(frozen=True)
class SortSpec:
    """Resolved configuration for one sort pass over one table.

    Attributes:
        primary_column: Column driving the order.
        primary_order: Direction for the primary column.
        primary_flag: Comparison semantics for the primary column.
        secondary_column: Tie-break column, or None.
        secondary_order: Direction for the tie-break column.
        secondary_flag: Comparison semantics for the tie-break column.
        sorted_by: Column recorded on the table as "sorted by"; defaults to
            primary_column.

    """

    primary_column: ColumnId
    primary_order: SortOrder = "desc"
    primary_flag: SortFlag = SortFlag.NATURAL
    secondary_column: ColumnId | None = None
    secondary_order: SortOrder = "asc"
    secondary_flag: SortFlag = SortFlag.NATURAL
    sorted_by: ColumnId | None = None


class Sorter:
    """Reorders the rows of one table according to a SortSpec.

    Usage:
        spec = SortSpec(primary_column="v", primary_flag=SortFlag.NUMERIC)
        Sorter(spec).sort(table)  # rows now ordered by "v" descending

    """

    def __init__(self, spec: SortSpec) -> None:
        self.spec = spec

    def sort(self, table: SortableTable) -> None:
        """Sort the non-summary rows of table in place.

        Args:
            table: Table to reorder. Sub-tables are not touched.

        """
        spec = self.spec
        marker = spec.sorted_by if spec.sorted_by is not None else spec.primary_column
        table.set_table_sorted_by(marker)

        # extract each primary value once
        primary_key = sort_key_for(spec.primary_flag)
        primary_keys: dict[int, Any] = {}
        with_value: list[SortableRow] = []
        without_value: list[SortableRow] = []
        for row in table.get_rows_without_summary_row():
            value = row.get_column(spec.primary_column)
            if is_sortable(value):
                primary_keys[id(row)] = primary_key(value)
                with_value.append(row)
            else:
                without_value.append(row)

        if spec.secondary_column is not None:
            with_value = self._order_by_secondary(with_value)
            without_value = self._order_by_secondary(without_value)

        with_value.sort(
            key=lambda row: primary_keys[id(row)],
            reverse=spec.primary_order == "desc",
        )

        logger.debug(
            "Sorted %d rows by %r (%s, %s), %d without value",
            len(with_value),
            spec.primary_column,
            spec.primary_order,
            spec.primary_flag.value,
            len(without_value),
        )
        table.set_rows(with_value + without_value)

    def _order_by_secondary(self, rows: list[SortableRow]) -> list[SortableRow]:
        """Order rows by the secondary column; rows lacking it keep input order, last."""
        spec = self.spec
        secondary_key = sort_key_for(spec.secondary_flag)

        keyed: list[tuple[Any, SortableRow]] = []
        missing: list[SortableRow] = []
        for row in rows:
            value = row.get_column(spec.secondary_column)
            if is_sortable(value):
                keyed.append((secondary_key(value), row))
            else:
                missing.append(row)

        keyed.sort(key=itemgetter(0), reverse=spec.secondary_order == "desc")
        return [row for _, row in keyed] + missing
