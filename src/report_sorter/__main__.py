"""Allow running report-sorter as ``python -m report_sorter``."""

from report_sorter.cli import app

if __name__ == "__main__":
    app()
