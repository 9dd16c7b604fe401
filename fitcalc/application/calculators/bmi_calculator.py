"""BMICalculator - Body Mass Index facade."""

from typing import Any, Optional

import structlog

from ...domain.classification.classifier import classify
from ...domain.classification.tables import BMI_CATEGORIES
from ...domain.metrics.calculation.bmi_service import BMIService
from ...domain.metrics.core.ports.calculators import IBMICalculator
from ...domain.shared.rounding import round_half_up
from ...domain.units.conversion import convert_height, convert_weight
from ...domain.units.value_objects import HeightUnit, WeightUnit
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, resolve_preference
from .results import BMIResult

logger = structlog.get_logger(__name__)


class BMICalculator(CalculatorFacade):
    """Compute and classify BMI from caller-unit weight and height."""

    metric = "bmi"

    def __init__(self, bmi_service: Optional[IBMICalculator] = None):
        self._bmi_service = bmi_service or BMIService()

    def compute(self, weight: Any, height: Any, prefs=None) -> Optional[BMIResult]:
        """
        Compute BMI.

        Args:
            weight: Body weight in the caller's weight unit
            height: Height in the caller's height unit
            prefs: UnitPreference (or mapping), defaults to configuration

        Returns:
            BMIResult, or None while inputs are missing or invalid

        Usage:

            BMICalculator().compute(70, 170).bmi  # 24.2
        """
        prefs = resolve_preference(prefs)
        try:
            weight_kg = convert_weight(
                require_number("weight", weight), prefs.weight_unit, WeightUnit.KG
            )
            height_cm = convert_height(
                require_number("height", height), prefs.height_unit, HeightUnit.CM
            )
            bmi = self._bmi_service.calculate(weight_kg, height_cm)
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        category = classify(bmi, BMI_CATEGORIES)
        logger.debug("bmi_computed", bmi=bmi, category=category.label)
        return BMIResult(bmi=round_half_up(bmi, 1), category=category)


_calculator = BMICalculator()


def compute_bmi(weight: Any, height: Any, prefs=None) -> Optional[BMIResult]:
    """Compute BMI with the default services. See ``BMICalculator.compute``."""
    return _calculator.compute(weight, height, prefs)
