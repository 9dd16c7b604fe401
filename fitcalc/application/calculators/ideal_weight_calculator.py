"""IdealWeightCalculator - ideal body weight facade."""

from typing import Any, Optional

from ...domain.metrics.calculation.ideal_weight_service import RANGE_MARGIN, IdealWeightService
from ...domain.metrics.core.ports.calculators import IIdealWeightCalculator
from ...domain.metrics.core.validation import ensure_finite_result
from ...domain.shared.rounding import round_half_up
from ...domain.units.conversion import convert_height, convert_weight
from ...domain.units.value_objects import HeightUnit, WeightUnit
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, require_sex, resolve_preference
from .results import IdealWeightResult, WeightRange


class IdealWeightCalculator(CalculatorFacade):
    """Estimate ideal weight with four formulas."""

    metric = "ideal_weight"

    def __init__(self, ideal_weight_service: Optional[IIdealWeightCalculator] = None):
        self._ideal_weight_service = ideal_weight_service or IdealWeightService()

    def compute(self, height: Any, gender: Any, prefs=None) -> Optional[IdealWeightResult]:
        """
        Compute ideal weight.

        The range is the span of the four estimates widened by 5 kg, or by
        11 lbs when the caller works in pounds.

        Returns:
            IdealWeightResult in the caller's weight unit, or None while
            inputs are missing or invalid
        """
        prefs = resolve_preference(prefs)
        try:
            height_cm = convert_height(
                require_number("height", height), prefs.height_unit, HeightUnit.CM
            )
            estimate_kg = self._ideal_weight_service.calculate(height_cm, require_sex(gender))
            estimate = estimate_kg.map(
                lambda kg: ensure_finite_result(
                    "ideal_weight", convert_weight(kg, WeightUnit.KG, prefs.weight_unit)
                )
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        low, high = estimate.range(RANGE_MARGIN[prefs.weight_unit])
        return IdealWeightResult(
            devine=round_half_up(estimate.devine, 1),
            robinson=round_half_up(estimate.robinson, 1),
            miller=round_half_up(estimate.miller, 1),
            hamwi=round_half_up(estimate.hamwi, 1),
            average=round_half_up(estimate.average, 1),
            range=WeightRange(min=round_half_up(low, 1), max=round_half_up(high, 1)),
            weight_unit=prefs.weight_unit,
        )


_calculator = IdealWeightCalculator()


def compute_ideal_weight(height: Any, gender: Any, prefs=None) -> Optional[IdealWeightResult]:
    """Compute ideal weight with the default services. See ``IdealWeightCalculator.compute``."""
    return _calculator.compute(height, gender, prefs)
