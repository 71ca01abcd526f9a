"""Tests for the summary counters"""
from edulog.services.stats import compute_stats

from conftest import make_item


class TestComputeStats:

    def test_empty_list(self):
        stats = compute_stats([])
        assert stats.total == 0
        assert stats.completion_rate == 0
        assert stats.completion_rate_label == "0.0%"

    def test_counts_sum_to_total(self, mixed_items):
        stats = compute_stats(mixed_items)
        assert stats.total == 6
        assert (stats.completed, stats.in_progress, stats.started) == (2, 2, 2)
        assert stats.completed + stats.in_progress + stats.started == stats.total

    def test_completion_rate_one_decimal(self):
        items = [
            make_item("1", "a", status="Completed"),
            make_item("2", "b"),
            make_item("3", "c"),
        ]
        stats = compute_stats(items)
        assert stats.completion_rate == 33.3
        assert stats.completion_rate_label == "33.3%"

    def test_all_completed(self):
        items = [make_item(str(i), "x", status="Completed") for i in range(4)]
        assert compute_stats(items).completion_rate == 100.0
