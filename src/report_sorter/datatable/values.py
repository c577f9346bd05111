"""Cell value classification.

Report columns are heterogeneous: a metric column may hold ints in one row,
a formatted string such as "45%" in another, and a nested array of per-goal
figures in a third. Sorting code never relies on implicit coercion; it asks
classify_value() what it is looking at and switches on the answer.
"""

from __future__ import annotations

import math
import re
from enum import StrEnum
from typing import Any, Final


class _Absent:
    """Sentinel type for a column a row does not have."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


# Returned by Row.get_column() for a missing column. Distinct from None,
# which is a present-but-empty value.
ABSENT: Final = _Absent()


class ValueKind(StrEnum):
    """Kind of a cell value as seen by the sorting engine."""

    NUMBER = "number"
    TEXT = "text"
    COMPOSITE = "composite"
    ABSENT = "absent"


# Full-match numeric literal, whitespace tolerant: "12", "-1.5", ".5", "1e3"
NUMERIC_STRING_PATTERN: Final = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)

# Leading numeric prefix used when a non-numeric string meets a numeric sort
NUMERIC_PREFIX_PATTERN: Final = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_COMPOSITE_TYPES: Final = (list, tuple, dict, set, frozenset)


def classify_value(value: Any) -> ValueKind:
    """Classify a cell value.

    None and float NaN classify as ABSENT: neither can be ordered against
    other values.

    Args:
        value: Value as returned by Row.get_column().

    Returns:
        The ValueKind of value.

    Examples:
        >>> classify_value(3)
        <ValueKind.NUMBER: 'number'>
        >>> classify_value("img10")
        <ValueKind.TEXT: 'text'>
        >>> classify_value([1, 2])
        <ValueKind.COMPOSITE: 'composite'>
        >>> classify_value(ABSENT)
        <ValueKind.ABSENT: 'absent'>

    """
    if value is ABSENT or value is None:
        return ValueKind.ABSENT
    if isinstance(value, int):
        return ValueKind.NUMBER
    if isinstance(value, float):
        return ValueKind.ABSENT if math.isnan(value) else ValueKind.NUMBER
    if isinstance(value, _COMPOSITE_TYPES):
        return ValueKind.COMPOSITE
    return ValueKind.TEXT


def is_sortable(value: Any) -> bool:
    """Check whether value can serve as a sort key."""
    return classify_value(value) in (ValueKind.NUMBER, ValueKind.TEXT)


def is_numeric(value: Any) -> bool:
    """Check whether value is a number or a string holding a numeric literal.

    Examples:
        >>> is_numeric(5)
        True
        >>> is_numeric(" 12.5 ")
        True
        >>> is_numeric("45%")
        False

    """
    kind = classify_value(value)
    if kind is ValueKind.NUMBER:
        return True
    if kind is ValueKind.TEXT:
        return NUMERIC_STRING_PATTERN.match(str(value)) is not None
    return False


def to_number(value: Any) -> float:
    """Convert a sortable value to its numeric magnitude.

    Strings use their leading numeric prefix ("45%" -> 45.0); values without
    one compare as 0.0. Integers beyond float range map to signed infinity.

    Examples:
        >>> to_number("45%")
        45.0
        >>> to_number("n/a")
        0.0
        >>> to_number(-(10**400))
        -inf

    """
    kind = classify_value(value)
    if kind is ValueKind.NUMBER:
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
    if kind is ValueKind.TEXT:
        match = NUMERIC_PREFIX_PATTERN.match(str(value))
        if match:
            return float(match.group(0))
    return 0.0
