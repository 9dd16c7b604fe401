"""Unit tests for the goal calculator."""

from datetime import date

import pytest
from structlog.testing import capture_logs

from fitcalc.application.activity_catalog import CustomActivityCatalog
from fitcalc.application.calculators import GoalCalculator, compute_goal
from fitcalc.domain.metrics.calculation.goal_projection_service import (
    LOW_CALORIE_WARNING,
    RAPID_LOSS_WARNING,
)
from fitcalc.domain.metrics.core.value_objects import GoalType
from fitcalc.domain.units import EnergyUnit, UnitPreference, WeightUnit

TODAY = date(2024, 1, 1)


class TestGoalCalculator:
    """Test goal projection facade."""

    def test_moderate_loss(self):
        """Test 70 -> 65 kg in 12 weeks."""
        result = compute_goal(70, 65, 170, 30, "male", "moderate", 12, today=TODAY)

        assert result.goal_type == GoalType.LOSS
        assert result.current_bmr == 1618
        assert result.current_tdee == 2507
        # 2507.125 - 38500 / 84
        assert result.target_calories == 2049
        assert result.daily_deficit == 458
        assert result.weekly_deficit == 3208
        assert result.weight_change == 5.0
        assert result.weekly_weight_change == 0.42
        assert result.target_date == date(2024, 3, 25)
        assert result.warnings == ()
        assert result.warning is None

    def test_aggressive_loss_warns_twice(self):
        """Test 10 kg in 5 weeks triggers both warnings, rate first."""
        result = compute_goal(70, 60, 170, 30, "male", "moderate", 5, today=TODAY)

        assert result.warnings == (RAPID_LOSS_WARNING, LOW_CALORIE_WARNING)
        assert result.warning == RAPID_LOSS_WARNING
        assert result.target_calories == 307
        assert result.weekly_weight_change == 2.0

    def test_one_kg_per_week_not_warned(self):
        """Test the rate threshold is strict."""
        result = compute_goal(70, 60, 170, 30, "male", "moderate", 10, today=TODAY)

        assert result.warnings == ()

    def test_gain(self):
        """Test a gain goal yields a surplus."""
        result = compute_goal(60, 70, 170, 30, "male", "moderate", 10, today=TODAY)

        # BMR 1517.5, TDEE 2352.125, surplus 1100 kcal/day
        assert result.goal_type == GoalType.GAIN
        assert result.target_calories == 3452
        assert result.daily_deficit == -1100
        assert result.weekly_deficit == -7700
        assert result.weekly_weight_change == 1.0
        assert result.warnings == ()

    def test_maintenance(self):
        """Test equal weights keep intake at TDEE."""
        result = compute_goal(70, 70, 170, 30, "male", "moderate", 8, today=TODAY)

        assert result.goal_type == GoalType.MAINTAIN
        assert result.target_calories == result.current_tdee
        assert result.daily_deficit == 0
        assert result.weekly_deficit == 0

    def test_pounds_threshold(self):
        """Test 20 lbs in 9 weeks exceeds 2.2 lbs/week."""
        result = compute_goal(
            220, 200, 70, 40, "male", "moderate", 9, UnitPreference.imperial(), today=TODAY
        )

        assert result.warnings == (RAPID_LOSS_WARNING,)
        assert result.weight_change == 20.0
        assert result.weekly_weight_change == 2.22
        assert result.weight_unit == WeightUnit.LBS

    def test_kilojoules(self):
        """Test energy figures in kJ."""
        prefs = UnitPreference(energy_unit="kJ")

        result = compute_goal(70, 65, 170, 30, "male", "moderate", 12, prefs, today=TODAY)

        assert result.energy_unit == EnergyUnit.KJ
        assert result.current_tdee == 10490
        assert result.target_calories == 8572
        assert result.daily_deficit == 1918

    def test_custom_activity(self):
        """Test custom activities from a catalog."""
        catalog = CustomActivityCatalog()
        worker = catalog.add("Construction Worker", 2.0)

        result = compute_goal(
            70, 70, 170, 30, "male", worker.id, 4, custom_activities=catalog, today=TODAY
        )

        assert result.current_tdee == 3235

    @pytest.mark.parametrize(
        "current,target,weeks,activity",
        [
            (None, 65, 12, "moderate"),
            (70, 0, 12, "moderate"),
            (70, -65, 12, "moderate"),
            (70, 65, 0, "moderate"),
            (70, 65, 105, "moderate"),
            (70, 65, 12, "custom-missing"),
        ],
    )
    def test_not_computable(self, current, target, weeks, activity):
        """Test missing or invalid inputs give no result."""
        assert compute_goal(current, target, 170, 30, "male", activity, weeks) is None

    def test_overflowing_energy_difference(self):
        """Test a weight difference too large to express in kcal gives no result."""
        assert compute_goal(1e305, 1, 170, 30, "male", "moderate", 12, today=TODAY) is None

    def test_warning_logged(self):
        """Test safety warnings are logged at info."""
        with capture_logs() as logs:
            GoalCalculator().compute(70, 60, 170, 30, "male", "moderate", 5, today=TODAY)

        warning_logs = [entry for entry in logs if entry["event"] == "goal_safety_warning"]
        assert len(warning_logs) == 1
        assert warning_logs[0]["log_level"] == "info"
        assert warning_logs[0]["count"] == 2
