"""GoalCalculator - weight goal projection facade."""

from datetime import date
from functools import partial
from typing import Any, Mapping, Optional

import structlog

from ...domain.metrics.calculation.goal_projection_service import GoalProjectionService
from ...domain.metrics.core.value_objects.body_stats import BodyStats
from ...domain.metrics.core.value_objects.custom_activity import CustomActivity
from ...domain.shared.rounding import round_half_up
from ...domain.units.conversion import convert_height, convert_weight
from ...domain.units.value_objects import HeightUnit, WeightUnit
from ..activity_catalog import resolve_activity
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, require_sex, resolve_preference
from .results import GoalResult

logger = structlog.get_logger(__name__)


class GoalCalculator(CalculatorFacade):
    """
    Plan daily intake for reaching a target weight.

    Safety warnings are advisory: they are attached to the result and
    never replace it.
    """

    metric = "goal"

    def __init__(self, goal_service: Optional[GoalProjectionService] = None):
        self._goal_service = goal_service or GoalProjectionService()

    def compute(
        self,
        current_weight: Any,
        target_weight: Any,
        height: Any,
        age: Any,
        gender: Any,
        activity: Any,
        timeframe_weeks: Any,
        prefs=None,
        custom_activities: Optional[Mapping[str, CustomActivity]] = None,
        today: Optional[date] = None,
    ) -> Optional[GoalResult]:
        """
        Compute a goal projection.

        Args:
            current_weight: Current weight in the caller's weight unit
            target_weight: Target weight in the caller's weight unit
            height: Height in the caller's height unit
            age: Age in years (1-120)
            gender: "male" or "female"
            activity: Same choices as ``TDEECalculator.compute``
            timeframe_weeks: Weeks to reach the target (1-104)
            prefs: UnitPreference (or mapping), defaults to configuration
            custom_activities: Caller-owned table of custom activities
            today: Start date, defaults to the current date

        Returns:
            GoalResult, or None while inputs are missing or invalid
        """
        prefs = resolve_preference(prefs)

        def to_kg(field: str, value: Any) -> float:
            return convert_weight(require_number(field, value), prefs.weight_unit, WeightUnit.KG)

        try:
            current = require_number("current_weight", current_weight)
            target = require_number("target_weight", target_weight)
            weeks = require_number("timeframe_weeks", timeframe_weeks)
            stats = BodyStats(
                weight=to_kg("current_weight", current),
                height=convert_height(
                    require_number("height", height), prefs.height_unit, HeightUnit.CM
                ),
                age=require_number("age", age),
                sex=require_sex(gender),
            )
            projection = self._goal_service.project(
                stats,
                target_weight=to_kg("target_weight", target),
                activity=resolve_activity(activity, custom_activities),
                timeframe_weeks=weeks,
                today=today,
            )

            # Caller-unit inputs keep the rate free of conversion noise at the thresholds
            weekly_weight_change = abs(current - target) / weeks
            warnings = self._goal_service.safety_warnings(projection, prefs, weekly_weight_change)

            energy = partial(self._energy, unit=prefs.energy_unit)
            result = GoalResult(
                goal_type=projection.goal_type,
                current_bmr=energy(projection.bmr.value),
                current_tdee=energy(projection.tdee.value),
                target_calories=energy(projection.target_calories),
                daily_deficit=energy(projection.daily_deficit),
                weekly_deficit=energy(projection.weekly_deficit),
                weight_change=round_half_up(abs(current - target), 1),
                weekly_weight_change=round_half_up(weekly_weight_change, 2),
                timeframe_weeks=projection.timeframe_weeks,
                target_date=projection.target_date,
                warnings=warnings,
                weight_unit=prefs.weight_unit,
                energy_unit=prefs.energy_unit,
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        if warnings:
            logger.info(
                "goal_safety_warning",
                goal_type=projection.goal_type.value,
                weekly_weight_change=round(weekly_weight_change, 2),
                count=len(warnings),
            )
        return result


_calculator = GoalCalculator()


def compute_goal(
    current_weight: Any,
    target_weight: Any,
    height: Any,
    age: Any,
    gender: Any,
    activity: Any,
    timeframe_weeks: Any,
    prefs=None,
    custom_activities: Optional[Mapping[str, CustomActivity]] = None,
    today: Optional[date] = None,
) -> Optional[GoalResult]:
    """Compute a goal projection with the default services. See ``GoalCalculator.compute``."""
    return _calculator.compute(
        current_weight,
        target_weight,
        height,
        age,
        gender,
        activity,
        timeframe_weeks,
        prefs,
        custom_activities,
        today,
    )
