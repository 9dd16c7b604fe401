"""Goal projection value objects - weight change plan."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .bmr import BMR
from .tdee import TDEE


class GoalType(str, Enum):
    """Direction of a weight goal.

    - LOSS: Target below current weight (calorie deficit)
    - MAINTAIN: Target equal to current weight
    - GAIN: Target above current weight (calorie surplus)
    """

    LOSS = "loss"
    MAINTAIN = "maintain"
    GAIN = "gain"

    @classmethod
    def from_difference(cls, weight_difference: float) -> "GoalType":
        """Classify current minus target weight.

        Example:
            >>> GoalType.from_difference(5.0)
            <GoalType.LOSS: 'loss'>
        """
        if weight_difference > 0:
            return cls.LOSS
        if weight_difference < 0:
            return cls.GAIN
        return cls.MAINTAIN

    def label(self) -> str:
        """Human-readable label."""
        labels = {
            GoalType.LOSS: "Weight Loss",
            GoalType.MAINTAIN: "Weight Maintenance",
            GoalType.GAIN: "Weight Gain",
        }
        return labels[self]


@dataclass(frozen=True)
class GoalProjection:
    """Calorie plan for reaching a target weight, in metric units.

    Deficit figures are signed: positive means eat below TDEE, negative
    means a surplus for a gain goal.

    Attributes:
        bmr: Current Mifflin-St Jeor BMR
        tdee: Current TDEE
        weight_difference: Current minus target weight (kg)
        total_energy: Energy to shed (kcal), weight_difference x 7700
        weekly_deficit: total_energy spread over the timeframe (kcal/week)
        daily_deficit: weekly_deficit / 7 (kcal/day)
        target_calories: TDEE minus daily_deficit (kcal/day)
        timeframe_weeks: Weeks to reach the target
        target_date: Date the target should be reached
    """

    bmr: BMR
    tdee: TDEE
    weight_difference: float
    total_energy: float
    weekly_deficit: float
    daily_deficit: float
    target_calories: float
    timeframe_weeks: float
    target_date: date

    @property
    def goal_type(self) -> GoalType:
        """Loss, gain or maintenance."""
        return GoalType.from_difference(self.weight_difference)

    @property
    def weekly_weight_change(self) -> float:
        """Magnitude of the planned weight change per week (kg)."""
        return abs(self.weight_difference) / self.timeframe_weeks
