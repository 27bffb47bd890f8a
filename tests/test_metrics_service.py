"""
Tests for metric flattening, the activity ratio and the coin detail fetch.
"""
from unittest.mock import patch

import requests

from services import metrics_service
from services.metrics_service import (
    activity_ratio,
    dict_to_table,
    get_dev_comm_data,
    get_metric,
)


def metric_names(table):
    return [row["metric"] for row in table]


class TestDictToTable:

    def test_list_values_are_excluded(self):
        table = dict_to_table({"forks": 120, "stars": 340, "code_additions_deletions_4_weeks": [10, 20]})
        assert table == [
            {"metric": "forks", "value": 120.0},
            {"metric": "stars", "value": 340.0},
        ]

    def test_none_values_are_excluded(self):
        table = dict_to_table({"twitter_followers": None, "reddit_subscribers": 500})
        assert table == [{"metric": "reddit_subscribers", "value": 500.0}]

    def test_nested_objects_are_excluded(self):
        table = dict_to_table({"code_additions_deletions_4_weeks": {"additions": 1, "deletions": -2}, "forks": 3})
        assert metric_names(table) == ["forks"]

    def test_values_are_floats(self):
        table = dict_to_table({"reddit_average_posts_48h": 0.25, "forks": 7})
        assert all(isinstance(row["value"], float) for row in table)

    def test_preserves_insertion_order(self):
        fields = {"zeta": 1, "alpha": 2, "mid": 3}
        assert metric_names(dict_to_table(fields)) == ["zeta", "alpha", "mid"]

    def test_single_character_numeric_string_passes(self):
        assert dict_to_table({"forks": "7"}) == [{"metric": "forks", "value": 7.0}]

    def test_uncastable_value_is_skipped(self):
        table = dict_to_table({"flag": "x", "forks": 1})
        assert metric_names(table) == ["forks"]

    def test_multi_character_string_is_excluded(self):
        assert dict_to_table({"forks": "120"}) == []

    def test_empty_list_is_excluded(self):
        assert dict_to_table({"last_4_weeks_commit_activity_series": []}) == []

    def test_empty_mapping(self):
        assert dict_to_table({}) == []


class TestActivityRatio:

    def test_rounds_to_two_decimals(self):
        table = [
            {"metric": "total_issues", "value": 3.0},
            {"metric": "closed_issues", "value": 2.0},
        ]
        assert activity_ratio(table) == 0.67

    def test_missing_metric(self):
        assert activity_ratio([{"metric": "total_issues", "value": 3.0}]) is None

    def test_zero_total(self):
        table = [
            {"metric": "total_issues", "value": 0.0},
            {"metric": "closed_issues", "value": 0.0},
        ]
        assert activity_ratio(table) is None

    def test_get_metric(self):
        assert get_metric([{"metric": "forks", "value": 1.0}], "forks") == 1.0
        assert get_metric([], "forks") is None


class TestGetDevCommData:

    def test_builds_both_tables(self, coin_list, coin_detail):
        with patch.object(metrics_service, "get_api_response", return_value=coin_detail) as mock_api:
            dev_table, comm_table = get_dev_comm_data("btc", coin_list)

        assert mock_api.call_args[0][0] == "/coins/bitcoin"
        assert "code_additions_deletions_4_weeks" not in metric_names(dev_table)
        assert "last_4_weeks_commit_activity_series" not in metric_names(dev_table)
        assert metric_names(dev_table)[:2] == ["forks", "stars"]
        assert "facebook_likes" not in metric_names(comm_table)
        assert get_metric(comm_table, "twitter_followers") == 6311826.0
        assert activity_ratio(dev_table) == 0.95

    def test_unknown_symbol_skips_fetch(self, coin_list):
        with patch.object(metrics_service, "get_api_response") as mock_api:
            assert get_dev_comm_data("xyz", coin_list) == ([], [])

        mock_api.assert_not_called()

    def test_fetch_failure_gives_empty_tables(self, coin_list):
        with patch.object(metrics_service, "get_api_response", side_effect=requests.Timeout("slow")):
            assert get_dev_comm_data("btc", coin_list) == ([], [])

    def test_missing_sections_give_empty_tables(self, coin_list, coin_detail):
        del coin_detail["community_data"]
        coin_detail["developer_data"] = None

        with patch.object(metrics_service, "get_api_response", return_value=coin_detail):
            dev_table, comm_table = get_dev_comm_data("btc", coin_list)

        assert dev_table == []
        assert comm_table == []
