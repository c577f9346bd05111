"""Metric name and index registry.

Archived report rows store their metrics under compact numeric indices to
keep blobs small, while freshly computed rows use readable names. A caller
asking to sort by "nb_visits" must therefore also find a table keyed by
index 2. This module is the single source of that mapping.

Usage:
    from report_sorter.metrics import INDEX_NB_VISITS, get_mapping_from_name_to_id

    mapping = get_mapping_from_name_to_id()
    mapping["nb_visits"]  # 2
"""

from __future__ import annotations

from typing import Final

LABEL_COLUMN: Final[str] = "label"

INDEX_NB_UNIQ_VISITORS: Final[int] = 1
INDEX_NB_VISITS: Final[int] = 2
INDEX_NB_ACTIONS: Final[int] = 3
INDEX_MAX_ACTIONS: Final[int] = 4
INDEX_SUM_VISIT_LENGTH: Final[int] = 5
INDEX_BOUNCE_COUNT: Final[int] = 6
INDEX_NB_VISITS_CONVERTED: Final[int] = 7
INDEX_NB_CONVERSIONS: Final[int] = 8
INDEX_REVENUE: Final[int] = 9
INDEX_GOALS: Final[int] = 10
INDEX_SUM_DAILY_NB_UNIQ_VISITORS: Final[int] = 11

# Action (page) reports
INDEX_PAGE_NB_HITS: Final[int] = 12
INDEX_PAGE_SUM_TIME_SPENT: Final[int] = 13
INDEX_PAGE_EXIT_NB_UNIQ_VISITORS: Final[int] = 14
INDEX_PAGE_EXIT_NB_VISITS: Final[int] = 15
INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS: Final[int] = 16
INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS: Final[int] = 17
INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS: Final[int] = 18
INDEX_PAGE_ENTRY_NB_VISITS: Final[int] = 19
INDEX_PAGE_ENTRY_NB_ACTIONS: Final[int] = 20
INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH: Final[int] = 21
INDEX_PAGE_ENTRY_BOUNCE_COUNT: Final[int] = 22

# Fallback ranking metric when the requested column is missing, and the
# default tie-breaker for every other metric.
DEFAULT_RANKING_COLUMN: Final[int] = INDEX_NB_VISITS
DEFAULT_RANKING_NAME: Final[str] = "nb_visits"

_NAME_TO_ID: Final[dict[str, int]] = {
    "nb_uniq_visitors": INDEX_NB_UNIQ_VISITORS,
    "nb_visits": INDEX_NB_VISITS,
    "nb_actions": INDEX_NB_ACTIONS,
    "max_actions": INDEX_MAX_ACTIONS,
    "sum_visit_length": INDEX_SUM_VISIT_LENGTH,
    "bounce_count": INDEX_BOUNCE_COUNT,
    "nb_visits_converted": INDEX_NB_VISITS_CONVERTED,
    "nb_conversions": INDEX_NB_CONVERSIONS,
    "revenue": INDEX_REVENUE,
    "goals": INDEX_GOALS,
    "sum_daily_nb_uniq_visitors": INDEX_SUM_DAILY_NB_UNIQ_VISITORS,
    "nb_hits": INDEX_PAGE_NB_HITS,
    "sum_time_spent": INDEX_PAGE_SUM_TIME_SPENT,
    "exit_nb_uniq_visitors": INDEX_PAGE_EXIT_NB_UNIQ_VISITORS,
    "exit_nb_visits": INDEX_PAGE_EXIT_NB_VISITS,
    "sum_daily_exit_nb_uniq_visitors": INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS,
    "entry_nb_uniq_visitors": INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS,
    "sum_daily_entry_nb_uniq_visitors": INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS,
    "entry_nb_visits": INDEX_PAGE_ENTRY_NB_VISITS,
    "entry_nb_actions": INDEX_PAGE_ENTRY_NB_ACTIONS,
    "entry_sum_visit_length": INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH,
    "entry_bounce_count": INDEX_PAGE_ENTRY_BOUNCE_COUNT,
}


def get_mapping_from_name_to_id() -> dict[str, int]:
    """Return a copy of the metric name to index mapping.

    Examples:
        >>> get_mapping_from_name_to_id()["nb_visits"]
        2

    """
    return dict(_NAME_TO_ID)


def get_mapping_from_id_to_name() -> dict[int, str]:
    """Return a copy of the metric index to name mapping.

    Examples:
        >>> get_mapping_from_id_to_name()[2]
        'nb_visits'

    """
    return {index: name for name, index in _NAME_TO_ID.items()}
