"""Pytest configuration and fixtures for report-sorter tests."""

from collections.abc import Callable
from typing import Any

import pytest

from report_sorter.datatable import DataTable, Row


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset config singleton before and after each test.

    This ensures tests don't leak configuration between each other.
    Tests that need a specific config must load it explicitly.
    """
    from report_sorter.core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def make_table() -> Callable[..., DataTable]:
    """Build a DataTable from plain column mappings.

    Usage:
        def test_something(make_table):
            table = make_table([{"label": "a", 2: 5}], summary={"label": "Others"})
    """

    def _make(
        rows: list[dict[Any, Any]],
        summary: dict[Any, Any] | None = None,
    ) -> DataTable:
        summary_row = Row(summary) if summary is not None else None
        return DataTable([Row(columns) for columns in rows], summary_row=summary_row)

    return _make


@pytest.fixture
def values_of() -> Callable[..., list[Any]]:
    """Read one column of the non-summary rows, in table order.

    Usage:
        def test_something(values_of):
            assert values_of(table, "label") == ["a", "b"]
    """

    def _values(table: DataTable, column: Any = "label") -> list[Any]:
        return [row.get_column(column) for row in table.get_rows_without_summary_row()]

    return _values
