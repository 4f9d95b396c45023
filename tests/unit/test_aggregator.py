"""Tests for progress and status aggregation."""

import pytest

from tracker_client.aggregator import compute_progress, compute_status
from tracker_client.models import ProjectStatus

from tests.unit.factories import make_task


class TestComputeProgress:
    def test_empty_list_is_zero(self):
        assert compute_progress([]) == 0

    def test_half_done(self):
        tasks = [make_task("done", 2), make_task("draft", 2)]
        assert compute_progress(tasks) == 50.00

    def test_all_done(self):
        tasks = [make_task("done", 1), make_task("done", 1)]
        assert compute_progress(tasks) == 100.00

    def test_in_progress_counts_as_not_done(self):
        assert compute_progress([make_task("in progress", 3)]) == 0.00

    def test_weights_are_respected(self):
        tasks = [make_task("done", 1), make_task("draft", 3)]
        assert compute_progress(tasks) == 25.00

    def test_rounded_to_two_decimals(self):
        tasks = [make_task("done", 1), make_task("draft", 1), make_task("draft", 1)]
        assert compute_progress(tasks) == 33.33

    def test_fractional_weights(self):
        tasks = [make_task("done", 0.5), make_task("draft", 1.5)]
        assert compute_progress(tasks) == 25.00

    def test_zero_total_weight_is_zero(self):
        tasks = [make_task("done", 0), make_task("draft", 0)]
        assert compute_progress(tasks) == 0

    def test_order_does_not_matter(self):
        tasks = [
            make_task("done", 3),
            make_task("draft", 7),
            make_task("in progress", 2),
            make_task("done", 5),
        ]
        expected = compute_progress(tasks)
        assert compute_progress(list(reversed(tasks))) == expected
        assert compute_progress(tasks[2:] + tasks[:2]) == expected

    @pytest.mark.parametrize(
        "statuses",
        [
            ["done"],
            ["draft"],
            ["done", "draft", "in progress"],
            ["in progress", "in progress", "done"],
        ],
    )
    def test_within_bounds(self, statuses):
        tasks = [make_task(status, weight=i + 1) for i, status in enumerate(statuses)]
        assert 0 <= compute_progress(tasks) <= 100


class TestComputeStatus:
    def test_all_done(self):
        tasks = [make_task("done"), make_task("done")]
        assert compute_status(tasks) == ProjectStatus.DONE

    def test_any_in_progress(self):
        tasks = [make_task("draft"), make_task("in progress"), make_task("done")]
        assert compute_status(tasks) == ProjectStatus.IN_PROGRESS

    def test_single_in_progress(self):
        assert compute_status([make_task("in progress", 3)]) == ProjectStatus.IN_PROGRESS

    def test_all_draft(self):
        tasks = [make_task("draft"), make_task("draft")]
        assert compute_status(tasks) == ProjectStatus.DRAFT

    def test_done_and_draft_without_in_progress_is_draft(self):
        tasks = [make_task("done", 2), make_task("draft", 2)]
        assert compute_status(tasks) == ProjectStatus.DRAFT

    def test_empty_list_defaults_to_draft(self):
        assert compute_status([]) == ProjectStatus.DRAFT

    def test_single_done_task(self):
        assert compute_status([make_task("done")]) == ProjectStatus.DONE
