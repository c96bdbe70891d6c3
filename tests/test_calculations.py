"""Tests for the bar load calculator."""

import pytest
from barload.core.calculations import (
    PlateSpec,
    effective_collar_weight,
    loaded_weight,
    side_weight,
    split_bar_load,
    weight_to_bar_load,
)
from barload.core.units import kg_to_lbs


def make_plates(pairs_by_weight):
    return [PlateSpec(weight=w, pairs=p) for w, p in pairs_by_weight]


class TestCollarsAndSideWeight:
    """Tests for collar handling and the per-side target."""

    def test_collars_kept_for_heavy_load(self):
        """Test collars count when the total covers bar and collars."""
        assert effective_collar_weight(100, 20, 2.5) == 2.5

    def test_collars_dropped_for_light_load(self):
        """Test collars are ignored below bar + 2 collars."""
        assert effective_collar_weight(20, 20, 2.5) == 0
        assert effective_collar_weight(24.99, 20, 2.5) == 0

    def test_collars_kept_at_exact_threshold(self):
        """Test a total equal to bar + collars keeps the collars."""
        assert effective_collar_weight(25, 20, 2.5) == 2.5

    def test_side_weight_kg(self):
        """Test side weight for 100kg on a 20kg bar with collars."""
        # (100 - 25) / 2 = 37.5
        assert side_weight(100, 20, 2.5) == 37.5

    def test_side_weight_negative_for_light_load(self):
        """Test side weight goes negative when the bar alone is too heavy."""
        # Collars ignored: (15 - 20) / 2 = -2.5
        assert side_weight(15, 20, 2.5) == -2.5

    def test_baseline_rounded_to_two_decimals(self):
        """Test converted collar weights are rounded before subtraction."""
        # 45 + 2 * 5.51155655 = 56.0231131 -> 56.02, (225 - 56.02) / 2
        assert side_weight(225, 45, 2.5 * 2.20462262) == pytest.approx(84.49)


class TestWeightToBarLoad:
    """Tests for greedy plate selection."""

    def test_kg_distribution(self, kg_plates):
        """Test 100kg with a 20kg bar and 2.5kg collars."""
        # 37.5kg per side
        result = weight_to_bar_load(100, make_plates(kg_plates), 20, 2.5)
        assert result == [25, 10, 2.5]

    def test_lbs_distribution(self, lbs_plates):
        """Test 225lbs with a 45lb bar and no collars."""
        # 90lbs per side
        result = weight_to_bar_load(225, make_plates(lbs_plates), 45, 0)
        assert result == [45, 45]

    def test_custom_bar_weight(self):
        """Test a 15kg bar."""
        # (80 - 20) / 2 = 30 per side
        result = weight_to_bar_load(80, make_plates([(25, 4), (5, 2)]), 15, 2.5)
        assert result == [25, 5]

    def test_insufficient_plates_leave_remainder(self):
        """Test running out of plates leaves a formatted remainder."""
        result = weight_to_bar_load(100, make_plates([(20, 1)]), 20, 2.5)
        assert result == [20, "17.500"]

    def test_remainder_has_three_decimals(self):
        """Test the remainder is always formatted with three decimals."""
        result = weight_to_bar_load(100, make_plates([(20, 1)]), 20, 2.5)
        assert isinstance(result[-1], str)
        assert result[-1] == "17.500"

    def test_no_collars_kg(self):
        """Test 100kg with collars disabled."""
        plates = make_plates([(25, 4), (20, 2), (10, 2), (5, 2)])
        # 40kg per side
        assert weight_to_bar_load(100, plates, 20, 0) == [25, 10, 5]

    def test_lbs_with_both_standard_bars(self):
        """Test 220lbs on a 45lb bar uses one of each smaller plate."""
        plates = make_plates([(45, 4), (25, 2), (10, 2), (5, 2), (2.5, 2)])
        # 87.5lbs per side
        assert weight_to_bar_load(220, plates, 45, 0) == [45, 25, 10, 5, 2.5]

    def test_converted_collar_weight_leaves_remainder(self, lbs_plates):
        """Test 2.5kg collars converted to lbs do not fit the lbs plates."""
        collar = kg_to_lbs(2.5)
        result = weight_to_bar_load(225, make_plates(lbs_plates), 45, collar)
        # 84.49 per side: 45 + 25 + 10 + 2.5, leaving 1.99
        assert result[:4] == [45, 25, 10, 2.5]
        assert len(result) == 5
        assert float(result[4]) == pytest.approx(1.99, abs=0.001)

    def test_zero_total_weight(self):
        """Test a zero total produces no plates."""
        result = weight_to_bar_load(0, make_plates([(25, 4), (20, 2)]), 20, 2.5)
        assert result == []

    def test_total_less_than_bar_and_collars(self):
        """Test a total below the bar weight produces no plates."""
        result = weight_to_bar_load(15, make_plates([(5, 2), (2.5, 2)]), 20, 2.5)
        assert result == []

    def test_total_equal_to_bar_weight(self):
        """Test the empty bar, with collars ignored."""
        result = weight_to_bar_load(20, make_plates([(5, 2), (2.5, 2)]), 20, 2.5)
        assert result == []

    def test_total_equal_to_bar_and_collars(self):
        """Test bar plus collars with no plates needed."""
        result = weight_to_bar_load(25, make_plates([(1.25, 2), (0.5, 2)]), 20, 2.5)
        assert result == []

    def test_float_noise_leaves_tiny_remainder(self):
        """Test an exact fit with float drift still reports a remainder."""
        plates = make_plates([(0.2, 1), (0.1, 1)])
        # Side weight is 0.1 + 0.2 = 0.30000000000000004, so 2.8e-17 is left over
        result = weight_to_bar_load((0.1 + 0.2) * 2, plates, 0, 0)
        assert result == [0.2, 0.1, "0.000"]

    def test_float_drift_below_plate_skips_it(self):
        """Test a residual just under a plate weight leaves that plate unused."""
        # 0.3 - 0.1 - 0.1 = 0.09999999999999998, which is less than 0.1
        result = weight_to_bar_load(0.6, make_plates([(0.1, 3)]), 0, 0)
        assert result == [0.1, 0.1, "0.100"]

    def test_empty_inventory(self):
        """Test an empty inventory returns only the remainder."""
        assert weight_to_bar_load(100, [], 20, 2.5) == ["37.500"]

    def test_plates_with_zero_pairs_skipped(self):
        """Test plates with no pairs are never used."""
        plates = make_plates([(25, 0), (20, 0), (10, 3)])
        result = weight_to_bar_load(100, plates, 20, 2.5)
        assert result == [10, 10, 10, "7.500"]

    def test_plates_used_in_given_order(self):
        """Test one of each plate, heaviest first."""
        plates = make_plates([(25, 1), (20, 1), (10, 1), (5, 1)])
        # 60kg per side
        assert weight_to_bar_load(145, plates, 20, 2.5) == [25, 20, 10, 5]

    def test_stops_when_plates_run_out(self):
        """Test a single pair leaves the rest as remainder."""
        result = weight_to_bar_load(145, make_plates([(25, 1)]), 20, 2.5)
        assert result == [25, "35.000"]

    def test_very_large_total(self):
        """Test heavy loads use as many large plates as fit."""
        plates = make_plates([(50, 10), (25, 10), (20, 10)])
        # 237.5 per side: 4 x 50, 1 x 25, 12.5 left
        result = weight_to_bar_load(500, plates, 20, 2.5)
        assert result == [50, 50, 50, 50, 25, "12.500"]

    def test_zero_bar_weight(self):
        """Test loading with no bar at all."""
        plates = make_plates([(25, 2), (10, 2), (5, 2)])
        assert weight_to_bar_load(60, plates, 0, 0) == [25, 5]

    def test_fractional_bar_and_collars(self):
        """Test fractional bar and collar weights that sum to a whole number."""
        plates = make_plates([(25, 2), (10, 2), (5, 2)])
        # 15.5 + 2 * 2.25 = 20, 40 per side
        assert weight_to_bar_load(100, plates, 15.5, 2.25) == [25, 10, 5]

    def test_exact_fit_uses_multiple_pairs(self):
        """Test two pairs of the same plate are used before moving on."""
        plates = make_plates([(25, 2), (20, 1), (10, 1), (5, 1), (2.5, 1)])
        # 57.5 per side: 25 + 25 + 5 + 2.5
        assert weight_to_bar_load(140, plates, 20, 2.5) == [25, 25, 5, 2.5]

    def test_greedy_does_not_backtrack(self):
        """Test the greedy choice is kept even when another combination fits exactly."""
        plates = make_plates([(15, 1), (10, 2)])
        # 20 per side: 15 first, then 10 no longer fits; 10 + 10 would have
        assert weight_to_bar_load(40, plates, 0, 0) == [15, "5.000"]

    def test_inventory_not_mutated(self, kg_plates):
        """Test pair counts on the caller's inventory are left alone."""
        plates = make_plates(kg_plates)
        weight_to_bar_load(300, plates, 20, 2.5)
        assert [(p.weight, p.pairs) for p in plates] == kg_plates

    def test_plates_and_remainder_sum_to_side_weight(self, kg_plates):
        """Test every selection accounts for the full side weight."""
        for total in (47.5, 100, 133.3, 187.25, 260):
            result = weight_to_bar_load(total, make_plates(kg_plates), 20, 2.5)
            plates, remainder = split_bar_load(result)
            covered = sum(plates) + (float(remainder) if remainder else 0)
            assert covered == pytest.approx(side_weight(total, 20, 2.5), abs=0.001)


class TestSplitAndLoadedWeight:
    """Tests for result helpers."""

    def test_split_without_remainder(self):
        """Test a plain plate list has no remainder."""
        assert split_bar_load([25, 10, 2.5]) == ([25, 10, 2.5], None)

    def test_split_with_remainder(self):
        """Test the trailing string is returned separately."""
        assert split_bar_load([20, "17.500"]) == ([20], "17.500")

    def test_split_empty(self):
        """Test an empty load."""
        assert split_bar_load([]) == ([], None)

    def test_loaded_weight(self):
        """Test total weight on the bar."""
        # 20 + 2 * 2.5 + 2 * (25 + 10 + 2.5) = 100
        assert loaded_weight([25, 10, 2.5], 20, 2.5) == 100
