"""Exception hierarchy for report-sorter.

The sorting engine itself never raises for degenerate input; these
exceptions cover the surrounding layers (configuration, table files) and
the one contract violation the engine detects.
"""

from __future__ import annotations

from pathlib import Path


class ReportSorterError(Exception):
    """Base exception for report-sorter.

    All report-sorter specific exceptions inherit from this class.
    """

    pass


class ConfigError(ReportSorterError):
    """Configuration error.

    Raised when:
    - Config file is missing or unreadable
    - Config file contains invalid YAML
    - Config values fail validation
    """

    pass


class TableLoadError(ReportSorterError):
    """Table document could not be loaded.

    Attributes:
        file_path: Path of the document (if loaded from disk).

    """

    def __init__(self, message: str, file_path: Path | None = None) -> None:
        """Initialize TableLoadError with context.

        Args:
            message: Human-readable error message.
            file_path: Path of the offending document.

        """
        if file_path is not None:
            message = f"{message} ({file_path})"
        super().__init__(message)
        self.file_path = file_path


class CyclicSubtableError(ReportSorterError):
    """A sub-table was reached twice during one recursive sort.

    Table trees are required to be acyclic; hitting this means the caller
    built a table that owns itself somewhere below.
    """

    pass
