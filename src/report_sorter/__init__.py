"""report-sorter - metric-aware sorting for hierarchical report tables."""

from importlib.metadata import version

try:
    __version__ = version("report-sorter")
except Exception:
    __version__ = "0.0.0-dev"
