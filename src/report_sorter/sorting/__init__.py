"""Sorting engine for report tables.

Provides:
- configure(), SortFilter: the entry point (resolve, infer, sort, recurse)
- ColumnResolver: primary/secondary column selection with fallback
- SortFlag, infer_sort_flag(), sort_key_for(): comparison semantics
- Sorter, SortSpec: multi-key ordering of one table

Example usage:
    from report_sorter.sorting import configure
    configure("nb_visits", order="desc").apply(table)

"""

from .columns import ColumnResolver
from .filter import SortFilter, configure
from .flags import (
    SortFlag,
    infer_sort_flag,
    natural_sort_key,
    numeric_sort_key,
    sort_key_for,
    string_sort_key,
)
from .sorter import Sorter, SortSpec, primary_sort_order, secondary_sort_order

__all__ = [
    # entry point
    "SortFilter",
    "configure",
    # columns
    "ColumnResolver",
    # flags
    "SortFlag",
    "infer_sort_flag",
    "natural_sort_key",
    "numeric_sort_key",
    "sort_key_for",
    "string_sort_key",
    # sorter
    "Sorter",
    "SortSpec",
    "primary_sort_order",
    "secondary_sort_order",
]
