"""Pytest fixtures for report_sorter.core tests.

Fixture Organization:
- sample_full_config: Config YAML with every section set
- write_config: Factory fixture to write config files to tmp_path

Usage in tests:
    def test_something(write_config, sample_full_config):
        config_path = write_config(sample_full_config)
        # ... use config_path
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def sample_full_config() -> str:
    """Full config YAML with all optional fields."""
    return """\
metrics:
  default_ranking_column: 2
  default_ranking_name: nb_visits
  label_column: label
  aliases:
    nb_uniq_visitors: 1
    nb_visits: 2
    revenue: 9
sort:
  order: asc
  natural_sort: false
  recursive: true
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create a config file writer for temporary directory.

    Returns:
        A function that writes content to a file and returns the path.

    """

    def _write(content: str, filename: str = "config.yaml") -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
