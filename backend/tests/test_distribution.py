"""
Tests for the distribution strategies.
"""

import pytest

from app.calculator import (
    FixedPercentageTiers,
    ValidationError,
    bonus_ratio,
    distribute_equal_split,
    distribute_fixed_tiers,
    rebalance_from_first_place,
    validate_tiers,
)


class TestBonusRatio:
    """Tests for the undefeated bonus ratio table."""

    @pytest.mark.parametrize("count, expected", [
        (1, 1.0),
        (2, 0.6),
        (3, 0.4),
        (4, 0.35),
        (5, 0.35),
        (32, 0.35),
    ])
    def test_ratio_by_prized_count(self, count, expected):
        """Test ratio lookup by number of prized players."""
        assert bonus_ratio(count) == expected


class TestEqualSplit:
    """Tests for distribute_equal_split."""

    def test_without_bonus(self):
        """Test that the pool is divided evenly among all prized players."""
        tiers, warnings = distribute_equal_split(1000, 5, undefeated_bonus=False)
        assert len(tiers) == 1
        assert tiers[0].amount_per_player == 200
        assert tiers[0].player_count == 5
        assert warnings == []

    def test_with_bonus_four_or_more(self):
        """Test that the X-0 player takes 35% and the rest is split."""
        tiers, warnings = distribute_equal_split(1000, 5, undefeated_bonus=True)
        assert [t.player_count for t in tiers] == [1, 4]
        assert tiers[0].label == "X-0 prize"
        assert tiers[0].amount_per_player == pytest.approx(350)
        assert tiers[1].amount_per_player == pytest.approx(162.5)
        assert tiers[1].display_amount == 162
        assert warnings == []

    def test_with_bonus_two_players(self):
        """Test the 60/40 split for two prized players."""
        tiers, _ = distribute_equal_split(1000, 2, undefeated_bonus=True)
        assert tiers[0].amount_per_player == pytest.approx(600)
        assert tiers[1].amount_per_player == pytest.approx(400)
        assert tiers[1].player_count == 1

    def test_with_bonus_three_players(self):
        """Test the 40% bonus for three prized players."""
        tiers, _ = distribute_equal_split(900, 3, undefeated_bonus=True)
        assert tiers[0].amount_per_player == pytest.approx(360)
        assert tiers[1].amount_per_player == pytest.approx(270)
        assert tiers[1].player_count == 2

    def test_single_prized_player_with_bonus(self):
        """Test that a lone X-0 player takes the whole pool without dividing by zero."""
        tiers, warnings = distribute_equal_split(810, 1, undefeated_bonus=True)
        assert len(tiers) == 1
        assert tiers[0].amount_per_player == pytest.approx(810)
        assert tiers[0].player_count == 1
        assert [w.code for w in warnings] == ["single_prized_player_bonus"]

    def test_zero_prized_players_raises(self):
        """Test that zero prized players is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            distribute_equal_split(1000, 0, undefeated_bonus=False)
        assert exc_info.value.field == "prized_player_count"


class TestFixedTiers:
    """Tests for distribute_fixed_tiers."""

    def test_default_tiers(self):
        """Test fixed percentages on a 1000 pool."""
        tiers = distribute_fixed_tiers(1000, FixedPercentageTiers(first=32, second=20, third=12, fifth=6))
        assert [(t.label, t.amount_per_player, t.player_count) for t in tiers] == [
            ("1st place", 320, 1),
            ("2nd place", 200, 1),
            ("3rd-4th place", 120, 2),
            ("5th-8th place", 60, 4),
        ]
        assert sum(t.total for t in tiers) == pytest.approx(1000)

    def test_weighted_sum_over_100_raises(self):
        """Test that 25/25/20/5 (weighted 110) is rejected."""
        with pytest.raises(ValidationError, match="100%"):
            distribute_fixed_tiers(1000, FixedPercentageTiers(first=25, second=25, third=20, fifth=5))

    def test_weighted_sum_under_100_raises(self):
        """Test that percentages leaving part of the pool unpaid are rejected."""
        with pytest.raises(ValidationError):
            distribute_fixed_tiers(1000, FixedPercentageTiers(first=30, second=20, third=10, fifth=5))

    def test_negative_percentage_raises(self):
        """Test that negative percentages are rejected even if the sum is 100."""
        with pytest.raises(ValidationError) as exc_info:
            distribute_fixed_tiers(1000, FixedPercentageTiers(first=110, second=-10, third=0, fifth=0))
        assert exc_info.value.field == "second"

    def test_fractional_percentages(self):
        """Test that fractional percentages summing to 100 are accepted."""
        tiers = distribute_fixed_tiers(1000, FixedPercentageTiers(first=40.5, second=19.5, third=10, fifth=5))
        assert tiers[0].amount_per_player == pytest.approx(405)
        assert tiers[0].display_amount == 405


class TestRebalanceFromFirstPlace:
    """Tests for rebalance_from_first_place."""

    def test_default_first_place(self):
        """Test that 32% first place yields the standard 20/12/6 tiers."""
        tiers = rebalance_from_first_place(32)
        assert (tiers.second, tiers.third, tiers.fifth) == (20, 12, 6)

    @pytest.mark.parametrize("first", [0, 10, 25, 32, 40, 50, 75, 99, 100])
    def test_always_sums_to_100(self, first):
        """Test that second place absorbs rounding so the total stays 100."""
        tiers = rebalance_from_first_place(first)
        assert tiers.weighted_total == 100

    def test_first_place_40(self):
        """Test proportional rounding for 40% first place."""
        tiers = rebalance_from_first_place(40)
        # 60 * 0.176 = 10.56 -> 11, 60 * 0.088 = 5.28 -> 5
        assert (tiers.second, tiers.third, tiers.fifth) == (18, 11, 5)

    def test_all_to_first(self):
        """Test that 100% first place leaves nothing for the others."""
        tiers = rebalance_from_first_place(100)
        assert (tiers.second, tiers.third, tiers.fifth) == (0, 0, 0)

    def test_out_of_range_raises(self):
        """Test that percentages outside 0..100 are rejected."""
        with pytest.raises(ValidationError):
            rebalance_from_first_place(101)
        with pytest.raises(ValidationError):
            rebalance_from_first_place(-1)

    def test_fractional_first_leaving_negative_second_raises(self):
        """Test that rounding which would push second place below zero is rejected."""
        # remainder 5.7 rounds to one percent each for 3rd-4th and 5th-8th, needing 6
        with pytest.raises(ValidationError) as exc_info:
            rebalance_from_first_place(94.3)
        assert exc_info.value.field == "first"

    def test_fractional_first_with_room_for_rounding(self):
        """Test that a fractional first place is fine when the remainder covers the rounded tiers."""
        tiers = rebalance_from_first_place(32.5)
        assert tiers.second >= 0
        assert tiers.weighted_total == pytest.approx(100)

    def test_whole_percentages_never_leave_negative_second(self):
        """Test that every whole first place percentage yields a usable split."""
        for first in range(0, 101):
            tiers = rebalance_from_first_place(first)
            assert tiers.second >= 0
            validate_tiers(tiers)

    def test_non_finite_first_raises(self):
        """Test that inf and nan are rejected."""
        with pytest.raises(ValidationError):
            rebalance_from_first_place(float("nan"))
        with pytest.raises(ValidationError):
            rebalance_from_first_place(float("inf"))
