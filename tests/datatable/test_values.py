"""Tests for cell value classification."""

import copy
import math
import pickle

import pytest

from report_sorter.datatable.values import (
    ABSENT,
    ValueKind,
    classify_value,
    is_numeric,
    is_sortable,
    to_number,
)


class TestAbsentSentinel:
    """Tests for the ABSENT sentinel."""

    def test_is_falsy(self) -> None:
        assert not ABSENT

    def test_is_not_none(self) -> None:
        """ABSENT is distinct from a stored None."""
        assert ABSENT is not None

    def test_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"

    def test_survives_copy_and_pickle(self) -> None:
        """Identity checks keep working on copied tables."""
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


class TestClassifyValue:
    """Tests for classify_value()."""

    @pytest.mark.parametrize("value", [0, 5, -3, 2.5, True])
    def test_numbers(self, value: object) -> None:
        assert classify_value(value) is ValueKind.NUMBER

    @pytest.mark.parametrize("value", ["", "img10", "45%", "12"])
    def test_text(self, value: str) -> None:
        """Strings are text even when they hold a number."""
        assert classify_value(value) is ValueKind.TEXT

    @pytest.mark.parametrize("value", [[1, 2], (1,), {"goal": 3}, {1}, frozenset()])
    def test_composite(self, value: object) -> None:
        assert classify_value(value) is ValueKind.COMPOSITE

    @pytest.mark.parametrize("value", [ABSENT, None, math.nan])
    def test_absent(self, value: object) -> None:
        """Missing, None and NaN cannot be ordered."""
        assert classify_value(value) is ValueKind.ABSENT

    def test_infinity_is_a_number(self) -> None:
        assert classify_value(math.inf) is ValueKind.NUMBER


class TestIsSortable:
    """Tests for is_sortable()."""

    @pytest.mark.parametrize("value", [0, 1.5, "", "abc"])
    def test_sortable(self, value: object) -> None:
        assert is_sortable(value)

    @pytest.mark.parametrize("value", [ABSENT, None, math.nan, [1], {"a": 1}])
    def test_not_sortable(self, value: object) -> None:
        assert not is_sortable(value)


class TestIsNumeric:
    """Tests for is_numeric()."""

    @pytest.mark.parametrize("value", [3, 0.5, "12", " -1.5 ", ".5", "1e3", "+7"])
    def test_numeric(self, value: object) -> None:
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["45%", "img2", "", "1.2.3", None, [1]])
    def test_not_numeric(self, value: object) -> None:
        assert not is_numeric(value)


class TestToNumber:
    """Tests for to_number()."""

    def test_number(self) -> None:
        assert to_number(3) == 3.0

    def test_numeric_string(self) -> None:
        assert to_number(" 12.5 ") == 12.5

    def test_leading_prefix(self) -> None:
        """Formatted values use their leading number."""
        assert to_number("45%") == 45.0
        assert to_number("-3 days") == -3.0

    def test_no_prefix_is_zero(self) -> None:
        assert to_number("n/a") == 0.0
        assert to_number("img2") == 0.0

    def test_unsortable_is_zero(self) -> None:
        assert to_number(None) == 0.0
        assert to_number([5]) == 0.0

    def test_huge_integers_map_to_infinity(self) -> None:
        """Integers beyond float range keep their sign instead of overflowing."""
        assert to_number(10**400) == math.inf
        assert to_number(-(10**400)) == -math.inf
