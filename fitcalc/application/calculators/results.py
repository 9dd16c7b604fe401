"""Calculation results returned to callers.

Every figure is already converted to the caller's units and rounded.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

from ...domain.classification.category_range import CategoryRange
from ...domain.metrics.core.value_objects.activity_level import ActivityLevel
from ...domain.metrics.core.value_objects.goal import GoalType
from ...domain.units.value_objects import EnergyUnit, WeightUnit


@dataclass(frozen=True)
class BMIResult:
    """Body Mass Index with its category."""

    bmi: float
    category: CategoryRange


@dataclass(frozen=True)
class BMRResult:
    """Basal Metabolic Rate per equation.

    Attributes:
        mifflin_st_jeor: Primary estimate
        harris_benedict: Revised Harris-Benedict estimate
        katch_mcardle: Present only when a valid body fat % was given
        category: Bracket of the Mifflin-St Jeor figure
        daily_calories_by_activity: Mifflin-St Jeor × each fixed multiplier
        energy_unit: Unit of every energy figure
    """

    mifflin_st_jeor: int
    harris_benedict: int
    katch_mcardle: Optional[int]
    category: CategoryRange
    daily_calories_by_activity: Dict[ActivityLevel, int]
    energy_unit: EnergyUnit = EnergyUnit.KCAL


@dataclass(frozen=True)
class TDEEResult:
    """Total Daily Energy Expenditure with eating guidance.

    Attributes:
        bmr: Mifflin-St Jeor BMR
        tdee: BMR × activity factor, the maintenance intake
        category: Bracket of the kcal TDEE
        activity_factor: Multiplier that was applied
        weight_loss_calories: Intake for about 0.5 kg/week loss
        weight_gain_calories: Intake for about 0.5 kg/week gain
        energy_unit: Unit of every energy figure
    """

    bmr: int
    tdee: int
    category: CategoryRange
    activity_factor: float
    weight_loss_calories: int
    weight_gain_calories: int
    energy_unit: EnergyUnit = EnergyUnit.KCAL


@dataclass(frozen=True)
class BodyFatResult:
    """Body fat percentage with its sex-specific category."""

    body_fat_percentage: float
    category: CategoryRange


@dataclass(frozen=True)
class WeightRange:
    """Inclusive weight span."""

    min: float
    max: float


@dataclass(frozen=True)
class IdealWeightResult:
    """Ideal weight per formula, their average and a healthy range."""

    devine: float
    robinson: float
    miller: float
    hamwi: float
    average: float
    range: WeightRange
    weight_unit: WeightUnit = WeightUnit.KG


@dataclass(frozen=True)
class TrainingLoadRow:
    """One row of the training-load table."""

    percentage: int
    weight: float
    intensity: CategoryRange


@dataclass(frozen=True)
class OneRMResult:
    """Estimated one-rep max and working weights derived from it."""

    one_rm: float
    percentages: Tuple[TrainingLoadRow, ...]
    weight_unit: WeightUnit = WeightUnit.KG


@dataclass(frozen=True)
class GoalResult:
    """Calorie plan for a weight goal.

    Deficits are signed: negative values are a surplus for a gain goal.

    Attributes:
        goal_type: Loss, gain or maintenance
        current_bmr: Mifflin-St Jeor BMR at current weight
        current_tdee: TDEE at current weight
        target_calories: Daily intake to reach the goal in time
        daily_deficit: TDEE minus target_calories
        weekly_deficit: daily_deficit × 7
        weight_change: Total change to make, caller's weight unit
        weekly_weight_change: Change per week, caller's weight unit
        timeframe_weeks: Weeks to the goal
        target_date: Date the goal is reached
        warnings: Advisory safety warnings, most important first
    """

    goal_type: GoalType
    current_bmr: int
    current_tdee: int
    target_calories: int
    daily_deficit: int
    weekly_deficit: int
    weight_change: float
    weekly_weight_change: float
    timeframe_weeks: float
    target_date: date
    warnings: Tuple[str, ...] = field(default_factory=tuple)
    weight_unit: WeightUnit = WeightUnit.KG
    energy_unit: EnergyUnit = EnergyUnit.KCAL

    @property
    def warning(self) -> Optional[str]:
        """First warning, if any."""
        return self.warnings[0] if self.warnings else None
