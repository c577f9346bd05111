"""In-memory report tables.

Provides:
- Row, DataTable, SimpleDataTable: the table tree the sorter reorders
- ABSENT, ValueKind, classify_value(): cell value classification
- SortableRow, SortableTable: the contract the sorter depends on
- load_table(), table_from_dict(), table_to_dict(): YAML/JSON documents
"""

from report_sorter.datatable.loaders import load_table, table_from_dict, table_to_dict
from report_sorter.datatable.protocols import SortableRow, SortableTable
from report_sorter.datatable.row import Row
from report_sorter.datatable.table import DataTable, SimpleDataTable
from report_sorter.datatable.values import (
    ABSENT,
    ValueKind,
    classify_value,
    is_numeric,
    is_sortable,
    to_number,
)

__all__ = [
    # values
    "ABSENT",
    "ValueKind",
    "classify_value",
    "is_numeric",
    "is_sortable",
    "to_number",
    # tables
    "DataTable",
    "Row",
    "SimpleDataTable",
    # protocols
    "SortableRow",
    "SortableTable",
    # loaders
    "load_table",
    "table_from_dict",
    "table_to_dict",
]
