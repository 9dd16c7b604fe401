"""GoalProjectionService - calorie plan for a target weight."""

from datetime import date, timedelta
from typing import Dict, Optional, Tuple

import structlog

from ...units.conversion import convert_energy, convert_weight
from ...units.value_objects import EnergyUnit, UnitPreference, WeightUnit
from ..core.ports.calculators import ActivitySelector, IBMRCalculator, ITDEECalculator
from ..core.validation import ensure_between, ensure_finite_result, ensure_positive
from ..core.value_objects.body_stats import BodyStats
from ..core.value_objects.goal import GoalProjection, GoalType
from .bmr_service import BMRService
from .tdee_service import TDEEService

logger = structlog.get_logger(__name__)

# Energy stored in one kg of body mass
KCAL_PER_KG = 7700.0

MIN_TIMEFRAME_WEEKS = 1
MAX_TIMEFRAME_WEEKS = 104

# Thresholds are per unit, not conversions of each other
MAX_SAFE_WEEKLY_LOSS: Dict[WeightUnit, float] = {
    WeightUnit.KG: 1.0,
    WeightUnit.LBS: 2.2,
}
MIN_SAFE_DAILY_ENERGY: Dict[EnergyUnit, float] = {
    EnergyUnit.KCAL: 1200.0,
    EnergyUnit.KJ: 5000.0,
}

RAPID_LOSS_WARNING = (
    "Warning: This rate of weight loss may be too aggressive. Consider a longer timeframe."
)
LOW_CALORIE_WARNING = (
    "Warning: Target calories are very low. Consult a healthcare professional."
)


class GoalProjectionService:
    """
    Project daily calories needed to reach a target weight.

    Flow:
    1. Calculate BMR (Mifflin-St Jeor) from current stats
    2. Calculate TDEE from BMR and activity
    3. Convert the weight difference to energy at 7700 kcal/kg
    4. Spread that energy over the timeframe and subtract it from TDEE

    A gain goal produces a negative deficit, i.e. a surplus, with no
    special casing.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
    ):
        self._bmr_calculator = bmr_calculator or BMRService()
        self._tdee_calculator = tdee_calculator or TDEEService()

    def project(
        self,
        stats: BodyStats,
        target_weight: float,
        activity: ActivitySelector,
        timeframe_weeks: float,
        today: Optional[date] = None,
    ) -> GoalProjection:
        """
        Build the calorie plan.

        Args:
            stats: Current body measurements (metric)
            target_weight: Target weight in kg
            activity: Fixed activity level, custom activity or raw factor
            timeframe_weeks: Weeks to reach the target (1-104)
            today: Start date, defaults to the current date

        Returns:
            GoalProjection in metric units

        Raises:
            DomainViolationError: If target weight or timeframe is invalid, or
                the energy difference does not fit in a float
        """
        target_weight = ensure_positive("target_weight", target_weight)
        weeks = ensure_between(
            "timeframe_weeks", timeframe_weeks, MIN_TIMEFRAME_WEEKS, MAX_TIMEFRAME_WEEKS
        )

        # Step 1-2: current energy expenditure
        bmr = self._bmr_calculator.calculate(stats)
        tdee = self._tdee_calculator.calculate(bmr, activity)

        # Step 3: positive = loss, negative = gain
        weight_difference = stats.weight - target_weight
        total_energy = ensure_finite_result("total_energy", weight_difference * KCAL_PER_KG)

        # Step 4: spread over the timeframe
        weekly_deficit = total_energy / weeks
        daily_deficit = weekly_deficit / 7
        target_calories = ensure_finite_result("target_calories", tdee.value - daily_deficit)

        start = today or date.today()
        projection = GoalProjection(
            bmr=bmr,
            tdee=tdee,
            weight_difference=weight_difference,
            total_energy=total_energy,
            weekly_deficit=weekly_deficit,
            daily_deficit=daily_deficit,
            target_calories=target_calories,
            timeframe_weeks=weeks,
            target_date=start + timedelta(weeks=weeks),
        )
        logger.debug(
            "goal_projected",
            goal_type=projection.goal_type.value,
            daily_deficit=round(daily_deficit, 1),
            target_calories=round(target_calories, 1),
        )
        return projection

    def safety_warnings(
        self,
        projection: GoalProjection,
        prefs: UnitPreference,
        weekly_weight_change: Optional[float] = None,
    ) -> Tuple[str, ...]:
        """
        Advisory warnings for an aggressive or very low calorie plan.

        Warnings never block a result. The weight-loss rate check comes
        first, then the calorie floor.

        Args:
            projection: Plan to assess
            prefs: Units the thresholds are expressed in
            weekly_weight_change: Weekly change in the caller's weight unit;
                derived from the projection when omitted

        Returns:
            Tuple of warning messages, empty when the plan looks safe
        """
        if weekly_weight_change is None:
            weekly_weight_change = convert_weight(
                projection.weekly_weight_change, WeightUnit.KG, prefs.weight_unit
            )
        target_calories = convert_energy(
            projection.target_calories, EnergyUnit.KCAL, prefs.energy_unit
        )

        warnings = []
        if (
            projection.goal_type == GoalType.LOSS
            and weekly_weight_change > MAX_SAFE_WEEKLY_LOSS[prefs.weight_unit]
        ):
            warnings.append(RAPID_LOSS_WARNING)
        if target_calories < MIN_SAFE_DAILY_ENERGY[prefs.energy_unit]:
            warnings.append(LOW_CALORIE_WARNING)
        return tuple(warnings)
