"""Tests for the metric name and index registry."""

from report_sorter.metrics import (
    DEFAULT_RANKING_COLUMN,
    DEFAULT_RANKING_NAME,
    INDEX_NB_VISITS,
    INDEX_REVENUE,
    get_mapping_from_id_to_name,
    get_mapping_from_name_to_id,
)


class TestMetricMappings:
    """Tests for the name/index mappings."""

    def test_default_ranking_is_visits(self) -> None:
        assert DEFAULT_RANKING_COLUMN == INDEX_NB_VISITS
        assert get_mapping_from_name_to_id()[DEFAULT_RANKING_NAME] == DEFAULT_RANKING_COLUMN

    def test_name_to_id(self) -> None:
        assert get_mapping_from_name_to_id()["revenue"] == INDEX_REVENUE

    def test_mappings_are_inverse(self) -> None:
        name_to_id = get_mapping_from_name_to_id()
        id_to_name = get_mapping_from_id_to_name()
        assert len(name_to_id) == len(id_to_name)
        for name, index in name_to_id.items():
            assert id_to_name[index] == name

    def test_returns_copies(self) -> None:
        get_mapping_from_name_to_id()["nb_visits"] = 99
        assert get_mapping_from_name_to_id()["nb_visits"] == INDEX_NB_VISITS
