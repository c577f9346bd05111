"""Core module for report-sorter configuration and utilities.

This module provides:
- Configuration models and singleton access via get_config()
- File-based configuration loading via load_config()
- Custom exception hierarchy with ReportSorterError as base
"""

from report_sorter.core.config import (
    GLOBAL_CONFIG_PATH,
    MAX_CONFIG_SIZE,
    Config,
    MetricsConfig,
    SortDefaults,
    get_config,
    load_config,
    load_global_config,
)
from report_sorter.core.exceptions import (
    ConfigError,
    CyclicSubtableError,
    ReportSorterError,
    TableLoadError,
)

__all__ = [
    # Config constants
    "GLOBAL_CONFIG_PATH",
    "MAX_CONFIG_SIZE",
    # Config models
    "Config",
    "MetricsConfig",
    "SortDefaults",
    # Config functions
    "get_config",
    "load_config",
    "load_global_config",
    # Exceptions
    "ConfigError",
    "CyclicSubtableError",
    "ReportSorterError",
    "TableLoadError",
]
