"""Comparison semantics for sort columns.

A column is compared in one of three ways:
- NUMERIC: by floating-point magnitude
- NATURAL: digit runs compared as numbers, case-insensitive ("img2" < "img10")
- STRING: case-insensitive code point order ("img10" < "img2")

infer_sort_flag() picks one by looking at the first usable value of the
column; sort_key_for() turns a flag into a key function for sorted().
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any, Final

from report_sorter.core.types import ColumnId
from report_sorter.datatable.protocols import SortableRow
from report_sorter.datatable.values import (
    ValueKind,
    classify_value,
    is_numeric,
    to_number,
)
from report_sorter.metrics import LABEL_COLUMN

logger = logging.getLogger(__name__)

# Only ASCII digits: str.isdigit() also accepts characters int() rejects ("²")
DIGIT_RUN_PATTERN: Final = re.compile(r"([0-9]+)")


class SortFlag(StrEnum):
    """How values of a sort column are compared."""

    NUMERIC = "numeric"
    NATURAL = "natural"
    STRING = "string"


SortKey = Callable[[Any], Any]


def natural_sort_key(value: Any) -> tuple[str | int, ...]:
    """Sort key for natural, case-insensitive ordering.

    Splitting on digit runs always yields text at even positions and numbers
    at odd positions, so two keys never compare a str against an int.

    Examples:
        >>> sorted(["img10", "img2", "IMG1"], key=natural_sort_key)
        ['IMG1', 'img2', 'img10']

    """
    parts = DIGIT_RUN_PATTERN.split(str(value).casefold())
    return tuple(int(part) if idx % 2 else part for idx, part in enumerate(parts))


def string_sort_key(value: Any) -> str:
    """Sort key for case-insensitive lexicographic ordering.

    Examples:
        >>> sorted(["img10", "img2", "IMG1"], key=string_sort_key)
        ['IMG1', 'img10', 'img2']

    """
    return str(value).casefold()


def numeric_sort_key(value: Any) -> float:
    """Sort key by numeric magnitude (see to_number for string handling)."""
    return to_number(value)


_KEYS: Final[dict[SortFlag, SortKey]] = {
    SortFlag.NUMERIC: numeric_sort_key,
    SortFlag.NATURAL: natural_sort_key,
    SortFlag.STRING: string_sort_key,
}


def sort_key_for(flag: SortFlag) -> SortKey:
    """Return the key function implementing flag."""
    return _KEYS[flag]


def infer_sort_flag(
    rows: Iterable[SortableRow],
    column: ColumnId,
    prefer_natural: bool = True,
    requested_column: ColumnId | None = None,
    label_column: str = LABEL_COLUMN,
) -> SortFlag:
    """Pick the comparison semantics for a column.

    The label column always sorts naturally. Otherwise the first row whose
    value is present and not composite decides: numeric values give
    NUMERIC, text gives NATURAL or STRING depending on prefer_natural.
    The scan stops at that row. Without any usable value, NATURAL.

    Args:
        rows: Rows in table order.
        column: Column the rows will be sorted by.
        prefer_natural: Use NATURAL rather than STRING for text values.
        requested_column: Column the caller asked for, if resolution
            substituted another one.
        label_column: Name of the label column.

    Returns:
        The SortFlag to use.

    """
    if label_column in (column, requested_column):
        return SortFlag.NATURAL

    for row in rows:
        value = row.get_column(column)
        if classify_value(value) not in (ValueKind.NUMBER, ValueKind.TEXT):
            continue

        if is_numeric(value):
            flag = SortFlag.NUMERIC
        elif prefer_natural:
            flag = SortFlag.NATURAL
        else:
            flag = SortFlag.STRING
        logger.debug("Column %r compares as %s (sample %r)", column, flag.value, value)
        return flag

    logger.debug("Column %r has no usable value, defaulting to natural", column)
    return SortFlag.NATURAL
