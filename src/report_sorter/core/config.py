"""Configuration models and loading for report-sorter.

Configuration is optional: without a file, defaults mirror the built-in
metric registry (visit count as the default ranking column, "label" as the
human-readable tie-breaker) and the historical sort defaults (descending,
natural comparison for text, no recursion).

Usage:
    from report_sorter.core.config import get_config, load_config

    load_config(Path("report-sorter.yaml"))
    config = get_config()
    config.metrics.default_ranking_column  # 2
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from report_sorter.core.exceptions import ConfigError
from report_sorter.core.types import ColumnId
from report_sorter.metrics import (
    DEFAULT_RANKING_COLUMN,
    DEFAULT_RANKING_NAME,
    LABEL_COLUMN,
    get_mapping_from_name_to_id,
)

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".report-sorter" / "config.yaml"

# Config files are tiny; anything larger is almost certainly the wrong file
MAX_CONFIG_SIZE: Final[int] = 1_048_576


class MetricsConfig(BaseModel):
    """Metric naming used by column resolution.

    Attributes:
        default_ranking_column: Column used when the requested one is missing,
            and the default tie-breaker.
        default_ranking_name: Readable alias of the default ranking column.
        label_column: Column holding the human-readable row label.
        aliases: Metric name to numeric index mapping.

    """

    model_config = ConfigDict(frozen=True)

    default_ranking_column: ColumnId = Field(
        default=DEFAULT_RANKING_COLUMN,
        description="Fallback ranking column (name or index)",
    )
    default_ranking_name: str = Field(
        default=DEFAULT_RANKING_NAME,
        description="Readable alias of the fallback ranking column",
    )
    label_column: str = Field(
        default=LABEL_COLUMN,
        description="Column holding the row label",
    )
    aliases: dict[str, int] = Field(
        default_factory=get_mapping_from_name_to_id,
        description="Metric name to numeric column index",
    )

    @field_validator("aliases", mode="after")
    @classmethod
    def validate_aliases(cls, v: dict[str, int]) -> dict[str, int]:
        """Reject negative column indices."""
        negative = sorted(name for name, index in v.items() if index < 0)
        if negative:
            raise ValueError(f"Negative column index for: {', '.join(negative)}")
        return v

    @model_validator(mode="after")
    def validate_default_alias(self) -> Self:
        """Ensure the default ranking alias does not point at another column."""
        mapped = self.aliases.get(self.default_ranking_name)
        if mapped is not None and mapped != self.default_ranking_column:
            raise ValueError(
                f"default_ranking_name '{self.default_ranking_name}' maps to {mapped}, "
                f"not to default_ranking_column {self.default_ranking_column!r}"
            )
        return self

    def canonical_column(self, column: ColumnId) -> int | None:
        """Return the numeric index aliased by a metric name, if any."""
        if isinstance(column, str):
            return self.aliases.get(column)
        return None

    def is_default_ranking(self, column: ColumnId | None) -> bool:
        """Check whether column is the default ranking column or its alias."""
        return column in (self.default_ranking_column, self.default_ranking_name)


class SortDefaults(BaseModel):
    """Defaults applied when a caller does not specify sort options.

    Attributes:
        order: Sort order for the primary column.
        natural_sort: Prefer natural over lexicographic comparison for text.
        recursive: Sort nested sub-tables as well.

    """

    model_config = ConfigDict(frozen=True)

    order: Literal["asc", "desc"] = Field(
        default="desc",
        description="Primary sort order: asc or desc",
    )
    natural_sort: bool = Field(
        default=True,
        description="Use natural comparison for text columns",
    )
    recursive: bool = Field(
        default=False,
        description="Propagate the ordering into sub-tables",
    )


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(frozen=True)

    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    sort: SortDefaults = Field(default_factory=SortDefaults)


_config: Config | None = None


def get_config() -> Config:
    """Return the active configuration, installing defaults on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def _reset_config() -> None:
    """Drop the active configuration (used by tests)."""
    global _config
    _config = None


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping.

    Raises:
        ConfigError: If the file is missing, too large, unreadable or not a mapping.

    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigError(f"Config file too large ({size} bytes, max {MAX_CONFIG_SIZE}): {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        logger.debug("Empty config file: %s", path)
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}: {path}")

    return data


def load_config(path: Path) -> Config:
    """Load, validate and activate configuration from a YAML file.

    Args:
        path: Path to the YAML config file.

    Returns:
        The validated Config, also returned by get_config() from now on.

    Raises:
        ConfigError: If the file is missing, malformed or fails validation.

    """
    global _config
    data = _read_yaml_mapping(path)

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    _config = config
    return config


def load_global_config(path: Path | None = None) -> Config:
    """Load the user-level configuration if it exists, else activate defaults.

    Args:
        path: Override for GLOBAL_CONFIG_PATH.

    Returns:
        The active Config.

    """
    global _config
    config_path = path or GLOBAL_CONFIG_PATH
    if config_path.exists():
        return load_config(config_path)

    logger.debug("No global config at %s, using defaults", config_path)
    _config = Config()
    return _config
