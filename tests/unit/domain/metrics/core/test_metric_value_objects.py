"""Unit tests for body metric value objects."""

import math
from datetime import date

import pytest

from fitcalc.domain.metrics.core.exceptions import DomainViolationError
from fitcalc.domain.metrics.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    BodyStats,
    CustomActivity,
    GoalProjection,
    GoalType,
    IdealWeightEstimate,
    Sex,
)


class TestSex:
    """Test Sex parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("male", Sex.MALE),
            ("Female", Sex.FEMALE),
            ("M", Sex.MALE),
            ("f", Sex.FEMALE),
            (Sex.FEMALE, Sex.FEMALE),
        ],
    )
    def test_parse(self, raw, expected):
        """Test accepted spellings."""
        assert Sex.parse(raw) == expected

    def test_parse_unknown(self):
        """Test unknown values raise DomainViolationError."""
        with pytest.raises(DomainViolationError) as exc_info:
            Sex.parse("other")

        assert exc_info.value.field == "gender"


class TestActivityLevel:
    """Test ActivityLevel enum."""

    def test_multipliers(self):
        """Test fixed PAL multipliers."""
        assert ActivityLevel.SEDENTARY.pal_multiplier() == 1.2
        assert ActivityLevel.LIGHT.pal_multiplier() == 1.375
        assert ActivityLevel.MODERATE.pal_multiplier() == 1.55
        assert ActivityLevel.ACTIVE.pal_multiplier() == 1.725
        assert ActivityLevel.VERY_ACTIVE.pal_multiplier() == 1.9

    def test_every_level_has_description(self):
        """Test descriptions exist for all levels."""
        for level in ActivityLevel:
            assert level.description()

    def test_from_factor(self):
        """Test reverse lookup by multiplier."""
        assert ActivityLevel.from_factor(1.9) is ActivityLevel.VERY_ACTIVE
        assert ActivityLevel.from_factor(1.8) is None

    def test_value_lookup(self):
        """Test levels resolve from their string value."""
        assert ActivityLevel("very_active") is ActivityLevel.VERY_ACTIVE


class TestCustomActivity:
    """Test CustomActivity value object."""

    def test_create_generates_id(self):
        """Test each created activity gets its own id."""
        first = CustomActivity.create("Construction Worker", 1.8)
        second = CustomActivity.create("Construction Worker", 1.8)

        assert first.id != second.id
        assert first.factor == 1.8
        assert str(first) == "Construction Worker (x1.8)"

    def test_create_strips_name(self):
        """Test surrounding whitespace is dropped."""
        assert CustomActivity.create("  Farmer ", 2.0).name == "Farmer"

    @pytest.mark.parametrize("factor", [0.9, 3.1])
    def test_factor_out_of_range(self, factor):
        """Test factor must lie in [1.0, 3.0]."""
        with pytest.raises(DomainViolationError):
            CustomActivity.create("Farmer", factor)

    @pytest.mark.parametrize("factor", [1.0, 3.0])
    def test_factor_bounds_inclusive(self, factor):
        """Test the bounds themselves are allowed."""
        assert CustomActivity.create("Farmer", factor).factor == factor

    def test_blank_name(self):
        """Test name cannot be blank."""
        with pytest.raises(DomainViolationError):
            CustomActivity.create("   ", 1.5)


class TestBodyStats:
    """Test BodyStats validation."""

    def test_valid(self):
        """Test construction and sex parsing."""
        stats = BodyStats(weight=70.0, height=170.0, age=30, sex="M")

        assert stats.sex == Sex.MALE

    @pytest.mark.parametrize(
        "weight,height,age",
        [(0.0, 170.0, 30), (70.0, -1.0, 30), (70.0, 170.0, 0), (70.0, 170.0, 121)],
    )
    def test_invalid(self, weight, height, age):
        """Test non-positive measurements and out-of-range ages."""
        with pytest.raises(DomainViolationError):
            BodyStats(weight=weight, height=height, age=age, sex=Sex.MALE)

    def test_age_bounds_inclusive(self):
        """Test ages 1 and 120 are accepted."""
        BodyStats(weight=70.0, height=170.0, age=1, sex=Sex.MALE)
        BodyStats(weight=70.0, height=170.0, age=120, sex=Sex.MALE)


class TestEnergyValueObjects:
    """Test BMR and TDEE value objects."""

    def test_bmr_positive(self):
        """Test BMR must be positive."""
        with pytest.raises(DomainViolationError):
            BMR(value=0.0)

    def test_bmr_str(self):
        """Test BMR display."""
        assert str(BMR(value=1780.0)) == "1780 kcal/day"
        assert repr(BMR(value=1780.0)) == "BMR(value=1780.0)"

    def test_tdee_positive(self):
        """Test TDEE must be positive."""
        with pytest.raises(DomainViolationError):
            TDEE(value=-5.0)

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_energy_must_be_finite(self, value):
        """Test overflowed energy values are rejected."""
        with pytest.raises(DomainViolationError):
            BMR(value=value)
        with pytest.raises(DomainViolationError):
            TDEE(value=value)


class TestIdealWeightEstimate:
    """Test IdealWeightEstimate helpers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.estimate = IdealWeightEstimate(60.0, 62.0, 64.0, 62.0)

    def test_average(self):
        """Test mean of four formulas."""
        assert self.estimate.average == 62.0

    def test_range(self):
        """Test range widens the extremes by the margin."""
        assert self.estimate.range(5.0) == (55.0, 69.0)

    def test_map(self):
        """Test map applies to every formula."""
        doubled = self.estimate.map(lambda value: value * 2)

        assert doubled.values() == (120.0, 124.0, 128.0, 124.0)


class TestGoalType:
    """Test GoalType derivation."""

    def test_from_difference(self):
        """Test sign of current minus target."""
        assert GoalType.from_difference(5.0) == GoalType.LOSS
        assert GoalType.from_difference(-5.0) == GoalType.GAIN
        assert GoalType.from_difference(0.0) == GoalType.MAINTAIN

    def test_label(self):
        """Test display labels."""
        assert GoalType.LOSS.label() == "Weight Loss"
        assert GoalType.MAINTAIN.label() == "Weight Maintenance"
        assert GoalType.GAIN.label() == "Weight Gain"

    def test_projection_properties(self):
        """Test goal type and weekly change derived from the projection."""
        projection = GoalProjection(
            bmr=BMR(value=1517.5),
            tdee=TDEE(value=2352.125, activity_factor=1.55),
            weight_difference=-10.0,
            total_energy=-77000.0,
            weekly_deficit=-7700.0,
            daily_deficit=-1100.0,
            target_calories=3452.125,
            timeframe_weeks=10,
            target_date=date(2024, 3, 11),
        )

        assert projection.goal_type == GoalType.GAIN
        assert projection.weekly_weight_change == 1.0
