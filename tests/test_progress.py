"""
Test the progress calculator.
"""
import logging

import pytest

from wandr.core.constants import BadgeTier
from wandr.services.progress import (
    compute_progress,
    next_tier,
    tier_for_percent,
    tiers_crossed,
)


class TestTierThresholds:
    """Thresholds are inclusive lower bounds."""

    @pytest.mark.parametrize(
        "percent,expected",
        [
            (0, BadgeTier.NONE),
            (24, BadgeTier.NONE),
            (25, BadgeTier.BRONZE),
            (49, BadgeTier.BRONZE),
            (50, BadgeTier.SILVER),
            (74, BadgeTier.SILVER),
            (75, BadgeTier.GOLD),
            (99, BadgeTier.GOLD),
            (100, BadgeTier.PLATINUM),
        ],
    )
    def test_tier_for_percent(self, percent, expected):
        assert tier_for_percent(percent) is expected

    def test_next_tier(self):
        assert next_tier(BadgeTier.NONE) is BadgeTier.BRONZE
        assert next_tier(BadgeTier.GOLD) is BadgeTier.PLATINUM
        assert next_tier(BadgeTier.PLATINUM) is None


class TestComputeProgress:
    """Test compute_progress."""

    def test_no_visits(self):
        result = compute_progress(0, 4)
        assert result.percent == 0
        assert result.current_tier is BadgeTier.NONE
        assert result.next_tier is BadgeTier.BRONZE
        assert result.progress_to_next_tier == 25

    def test_exact_threshold(self):
        result = compute_progress(1, 4)
        assert result.percent == 25
        assert result.current_tier is BadgeTier.BRONZE
        assert result.next_tier is BadgeTier.SILVER
        assert result.progress_to_next_tier == 25

    def test_percent_is_floored(self):
        assert compute_progress(1, 3).percent == 33
        assert compute_progress(2, 3).percent == 66
        assert compute_progress(99, 100).percent == 99
        # 199/200 is 99.5; flooring keeps it below platinum
        result = compute_progress(199, 200)
        assert result.percent == 99
        assert result.current_tier is BadgeTier.GOLD
        assert result.progress_to_next_tier == 1

    def test_just_below_threshold(self):
        result = compute_progress(1, 5)
        assert result.percent == 20
        assert result.current_tier is BadgeTier.NONE
        assert result.progress_to_next_tier == 5

    def test_complete(self):
        result = compute_progress(4, 4)
        assert result.percent == 100
        assert result.current_tier is BadgeTier.PLATINUM
        assert result.next_tier is None
        assert result.progress_to_next_tier == 0

    def test_zero_total(self):
        result = compute_progress(0, 0)
        assert result.percent == 0
        assert result.current_tier is BadgeTier.NONE
        assert result.next_tier is BadgeTier.BRONZE

    def test_visited_above_total_is_clamped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wandr.services.progress"):
            result = compute_progress(5, 4)

        assert result.percent == 100
        assert result.current_tier is BadgeTier.PLATINUM
        assert any("exceeds total" in r.getMessage() for r in caplog.records)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            compute_progress(-1, 4)
        with pytest.raises(ValueError):
            compute_progress(1, -4)


class TestTiersCrossed:
    def test_single_step(self):
        assert tiers_crossed(BadgeTier.NONE, BadgeTier.BRONZE) == [BadgeTier.BRONZE]

    def test_jump_lists_every_tier_in_order(self):
        assert tiers_crossed(BadgeTier.NONE, BadgeTier.PLATINUM) == [
            BadgeTier.BRONZE,
            BadgeTier.SILVER,
            BadgeTier.GOLD,
            BadgeTier.PLATINUM,
        ]
        assert tiers_crossed(BadgeTier.BRONZE, BadgeTier.GOLD) == [
            BadgeTier.SILVER,
            BadgeTier.GOLD,
        ]

    def test_nothing_new(self):
        assert tiers_crossed(BadgeTier.SILVER, BadgeTier.SILVER) == []
        assert tiers_crossed(BadgeTier.GOLD, BadgeTier.SILVER) == []
        assert tiers_crossed(BadgeTier.NONE, BadgeTier.NONE) == []
