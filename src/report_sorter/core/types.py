"""Core type definitions for report-sorter.

This module provides type aliases and utilities for identifiers that can be
either numeric or string-based. Report rows address their columns either by
metric name ("nb_visits", "label") or by a compact numeric index (2), and
both forms travel through the same code paths.
"""

from __future__ import annotations

from typing import Literal, TypeAlias

# Column ID can be int (1, 2, 3) or str ("label", "nb_visits", "revenue")
# Used for: requested sort column, resolved primary/secondary columns, row keys
ColumnId: TypeAlias = int | str

# Sort direction as accepted from callers and configuration
SortOrder: TypeAlias = Literal["asc", "desc"]


def normalize_sort_order(order: str | None) -> SortOrder:
    """Normalize a caller supplied order to "asc" or "desc".

    Anything that is not exactly "asc" (case-insensitive, surrounding
    whitespace ignored) sorts descending.

    Args:
        order: Requested order.

    Returns:
        "asc" or "desc".

    Examples:
        >>> normalize_sort_order("asc")
        'asc'
        >>> normalize_sort_order("DESC")
        'desc'
        >>> normalize_sort_order("sideways")
        'desc'

    """
    if order is not None and order.strip().lower() == "asc":
        return "asc"
    return "desc"


def parse_column_id(value: str) -> ColumnId:
    """Parse column ID from string, returning int if numeric.

    Args:
        value: String representation of a column ID.

    Returns:
        Integer if value is a non-negative integer literal, otherwise the
        original string.

    Examples:
        >>> parse_column_id("2")
        2
        >>> parse_column_id("nb_visits")
        'nb_visits'
        >>> parse_column_id("-1")
        '-1'

    """
    if value.isascii() and value.isdigit():
        return int(value)
    return value


def column_id_label(column: ColumnId | None) -> str:
    """Render a column ID for log messages and CLI output.

    Examples:
        >>> column_id_label(2)
        '#2'
        >>> column_id_label("label")
        'label'
        >>> column_id_label(None)
        '-'

    """
    if column is None:
        return "-"
    if isinstance(column, int):
        return f"#{column}"
    return column
