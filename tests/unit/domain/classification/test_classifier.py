"""Unit tests for category classification."""

import math

import pytest

from fitcalc.domain.classification import (
    BMI_CATEGORIES,
    BMR_CATEGORIES,
    BODY_FAT_CATEGORIES,
    TDEE_CATEGORIES,
    TRAINING_INTENSITY_CATEGORIES,
    UNKNOWN_CATEGORY,
    CategoryRange,
    classify,
    reference_rows,
)
from fitcalc.domain.metrics.core.value_objects import Sex


class TestCategoryRange:
    """Test CategoryRange value object."""

    def test_contains_is_inclusive(self):
        """Test both bounds are inside the range."""
        category = CategoryRange(18.5, 24.9, "Normal Weight")

        assert category.contains(18.5)
        assert category.contains(24.9)
        assert not category.contains(25.0)

    def test_min_above_max_rejected(self):
        """Test bounds must be ordered."""
        with pytest.raises(ValueError):
            CategoryRange(10, 5, "Broken")

    def test_unknown_sentinel(self):
        """Test only the sentinel reports itself unknown."""
        assert not UNKNOWN_CATEGORY.is_known
        assert BMI_CATEGORIES[0].is_known
        assert str(UNKNOWN_CATEGORY) == "Unknown"


class TestClassifyBMI:
    """Test classification against the BMI table."""

    def test_lower_boundary_of_normal(self):
        """Test 18.5 is Normal Weight, not Underweight."""
        assert classify(18.5, BMI_CATEGORIES).label == "Normal Weight"

    def test_upper_boundary_of_underweight(self):
        """Test 18.4 is Underweight."""
        assert classify(18.4, BMI_CATEGORIES).label == "Underweight"

    def test_gap_between_ranges_is_unknown(self):
        """Test values between authored ranges are not snapped to a neighbour."""
        assert classify(18.45, BMI_CATEGORIES) is UNKNOWN_CATEGORY
        assert classify(24.95, BMI_CATEGORIES) is UNKNOWN_CATEGORY

    def test_top_range_is_unbounded(self):
        """Test values beyond the last max still classify."""
        assert classify(150.0, BMI_CATEGORIES).label == "Obese"

    def test_below_first_range_is_unknown(self):
        """Test values under the table are unknown."""
        assert classify(-1.0, BMI_CATEGORIES) is UNKNOWN_CATEGORY

    def test_description_carried(self):
        """Test the description comes with the label."""
        assert classify(22.0, BMI_CATEGORIES).description == "Healthy weight range"


class TestClassifyBodyFat:
    """Test sex-specific body fat tables."""

    @pytest.mark.parametrize(
        "sex,value,label",
        [
            (Sex.MALE, 3.0, "Essential Fat"),
            (Sex.MALE, 13.0, "Athletes"),
            (Sex.MALE, 18.0, "Average"),
            (Sex.MALE, 40.0, "Obese"),
            (Sex.FEMALE, 12.0, "Essential Fat"),
            (Sex.FEMALE, 22.0, "Fitness"),
            (Sex.FEMALE, 32.0, "Obese"),
        ],
    )
    def test_labels(self, sex, value, label):
        """Test representative values per sex."""
        assert classify(value, BODY_FAT_CATEGORIES[sex]).label == label

    def test_same_value_differs_by_sex(self):
        """Test 22% is Average for men but Fitness for women."""
        assert classify(22.0, BODY_FAT_CATEGORIES[Sex.MALE]).label == "Average"
        assert classify(22.0, BODY_FAT_CATEGORIES[Sex.FEMALE]).label == "Fitness"

    def test_below_essential_is_unknown(self):
        """Test percentages under the first bracket are unknown."""
        assert classify(1.0, BODY_FAT_CATEGORIES[Sex.MALE]) is UNKNOWN_CATEGORY


class TestHalfOpenTables:
    """Test tables with "below X" thresholds."""

    def test_bmr_thresholds(self):
        """Test each threshold belongs to the upper bracket."""
        assert classify(1199.9, BMR_CATEGORIES).label == "Low Metabolic Rate"
        assert classify(1200, BMR_CATEGORIES).label == "Below Average"
        assert classify(1617.5, BMR_CATEGORIES).label == "Average"
        assert classify(1800, BMR_CATEGORIES).label == "Above Average"
        assert classify(2200, BMR_CATEGORIES).label == "High Metabolic Rate"

    def test_no_gap_just_below_threshold(self):
        """Test the largest float below a threshold is still classified."""
        just_below = math.nextafter(1500, -math.inf)

        assert classify(just_below, TDEE_CATEGORIES).label == "Low Energy Needs"

    def test_training_intensity(self):
        """Test intensity labels for the training percentages."""
        labels = {
            percentage: classify(percentage, TRAINING_INTENSITY_CATEGORIES).label
            for percentage in (50, 60, 65, 70, 75, 80, 85, 90, 95, 100)
        }

        assert labels[50] == "Warm-up"
        assert labels[65] == "Light"
        assert labels[75] == "Moderate"
        assert labels[85] == "Heavy"
        assert labels[90] == "Max Effort"
        assert labels[100] == "Max Effort"


class TestReferenceRows:
    """Test legend rows for display."""

    def test_top_row_is_open(self):
        """Test the last row has no max."""
        rows = reference_rows(BMI_CATEGORIES)

        assert len(rows) == 4
        assert rows[0]["max"] == 18.4
        assert rows[-1]["label"] == "Obese"
        assert rows[-1]["max"] is None
