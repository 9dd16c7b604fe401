"""BMRCalculator - Basal Metabolic Rate facade."""

from functools import partial
from typing import Any, Optional

import structlog

from ...domain.classification.classifier import classify
from ...domain.classification.tables import BMR_CATEGORIES
from ...domain.metrics.calculation.bmr_service import BMRService
from ...domain.metrics.core.ports.calculators import IBMRCalculator
from ...domain.metrics.core.value_objects.activity_level import ActivityLevel
from ...domain.metrics.core.value_objects.body_stats import BodyStats
from ...domain.units.conversion import convert_height, convert_weight
from ...domain.units.value_objects import HeightUnit, WeightUnit
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import optional_number, require_number, require_sex, resolve_preference
from .results import BMRResult

logger = structlog.get_logger(__name__)


class BMRCalculator(CalculatorFacade):
    """Compute BMR with every applicable equation."""

    metric = "bmr"

    def __init__(self, bmr_service: Optional[IBMRCalculator] = None):
        self._bmr_service = bmr_service or BMRService()

    def compute(
        self,
        weight: Any,
        height: Any,
        age: Any,
        gender: Any,
        body_fat: Any = None,
        prefs=None,
    ) -> Optional[BMRResult]:
        """
        Compute BMR.

        Args:
            weight: Body weight in the caller's weight unit
            height: Height in the caller's height unit
            age: Age in years (1-120)
            gender: "male" or "female"
            body_fat: Optional body fat %, enables Katch-McArdle when in (0, 50)
            prefs: UnitPreference (or mapping), defaults to configuration

        Returns:
            BMRResult in the caller's energy unit, or None while inputs are
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
            estimate = self._bmr_service.estimate(stats, optional_number(body_fat))
            mifflin = estimate.mifflin_st_jeor.value
            category = classify(mifflin, BMR_CATEGORIES)

            energy = partial(self._energy, unit=prefs.energy_unit)
            result = BMRResult(
                mifflin_st_jeor=energy(mifflin),
                harris_benedict=energy(estimate.harris_benedict.value),
                katch_mcardle=(
                    energy(estimate.katch_mcardle.value)
                    if estimate.katch_mcardle is not None
                    else None
                ),
                category=category,
                daily_calories_by_activity={
                    level: energy(mifflin * level.pal_multiplier()) for level in ActivityLevel
                },
                energy_unit=prefs.energy_unit,
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        logger.debug("bmr_computed", mifflin_st_jeor=mifflin, category=category.label)
        return result


_calculator = BMRCalculator()


def compute_bmr(
    weight: Any,
    height: Any,
    age: Any,
    gender: Any,
    body_fat: Any = None,
    prefs=None,
) -> Optional[BMRResult]:
    """Compute BMR with the default services. See ``BMRCalculator.compute``."""
    return _calculator.compute(weight, height, age, gender, body_fat, prefs)
