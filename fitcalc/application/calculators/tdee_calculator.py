"""TDEECalculator - Total Daily Energy Expenditure facade."""

from functools import partial
from typing import Any, Mapping, Optional

import structlog

from ...domain.classification.classifier import classify
from ...domain.classification.tables import TDEE_CATEGORIES
from ...domain.metrics.calculation.bmr_service import BMRService
from ...domain.metrics.calculation.tdee_service import TDEEService
from ...domain.metrics.core.ports.calculators import IBMRCalculator, ITDEECalculator
from ...domain.metrics.core.value_objects.body_stats import BodyStats
from ...domain.metrics.core.value_objects.custom_activity import CustomActivity
from ...domain.units.conversion import convert_height, convert_weight
from ...domain.units.value_objects import HeightUnit, WeightUnit
from ..activity_catalog import resolve_activity
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, require_sex, resolve_preference
from .results import TDEEResult

logger = structlog.get_logger(__name__)

# About 0.5 kg of body mass per week
WEEKLY_HALF_KG_ADJUSTMENT_KCAL = 500.0


class TDEECalculator(CalculatorFacade):
    """Compute TDEE from body stats and an activity choice."""

    metric = "tdee"

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()

    def compute(
        self,
        weight: Any,
        height: Any,
        age: Any,
        gender: Any,
        activity: Any,
        prefs=None,
        custom_activities: Optional[Mapping[str, CustomActivity]] = None,
    ) -> Optional[TDEEResult]:
        """
        Compute TDEE.

        Args:
            weight: Body weight in the caller's weight unit
            height: Height in the caller's height unit
            age: Age in years (1-120)
            gender: "male" or "female"
            activity: ActivityLevel or its value, a custom activity (or
                its id in custom_activities), or a factor in [1.0, 3.0]
            prefs: UnitPreference (or mapping), defaults to configuration
            custom_activities: Caller-owned table of custom activities

        Returns:
            TDEEResult in the caller's energy unit, or None while inputs are
            missing or invalid
        """
        prefs = resolve_preference(prefs)
        try:
            stats = BodyStats(
                weight=convert_weight(
                    require_number("weight", weight), prefs.weight_unit, WeightUnit.KG
                ),
                height=convert_height(
                    require_number("height", height), prefs.height_unit, HeightUnit.CM
                ),
                age=require_number("age", age),
                sex=require_sex(gender),
            )
            selector = resolve_activity(activity, custom_activities)
            bmr = self._bmr_service.calculate(stats)
            tdee = self._tdee_service.calculate(bmr, selector)
            category = classify(tdee.value, TDEE_CATEGORIES)

            energy = partial(self._energy, unit=prefs.energy_unit)
            result = TDEEResult(
                bmr=energy(bmr.value),
                tdee=energy(tdee.value),
                category=category,
                activity_factor=tdee.activity_factor,
                weight_loss_calories=energy(tdee.value - WEEKLY_HALF_KG_ADJUSTMENT_KCAL),
                weight_gain_calories=energy(tdee.value + WEEKLY_HALF_KG_ADJUSTMENT_KCAL),
                energy_unit=prefs.energy_unit,
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        logger.debug(
            "tdee_computed",
            tdee=tdee.value,
            activity_factor=tdee.activity_factor,
            category=category.label,
        )
        return result


_calculator = TDEECalculator()


def compute_tdee(
    weight: Any,
    height: Any,
    age: Any,
    gender: Any,
    activity: Any,
    prefs=None,
    custom_activities: Optional[Mapping[str, CustomActivity]] = None,
) -> Optional[TDEEResult]:
    """Compute TDEE with the default services. See ``TDEECalculator.compute``."""
    return _calculator.compute(weight, height, age, gender, activity, prefs, custom_activities)
