"""IdealWeightService - height-based ideal body weight."""

from typing import Dict, Tuple

from ...units.value_objects import WeightUnit
from ..core.ports.calculators import IIdealWeightCalculator
from ..core.validation import ensure_finite_result, ensure_positive
from ..core.value_objects.ideal_weight import IdealWeightEstimate
from ..core.value_objects.sex import Sex

# (base kg at 5 ft, kg per inch above 5 ft), in Devine/Robinson/Miller/Hamwi order
FORMULA_CONSTANTS: Dict[Sex, Tuple[Tuple[float, float], ...]] = {
    Sex.MALE: ((50.0, 2.3), (52.0, 1.9), (56.2, 1.41), (48.0, 2.7)),
    Sex.FEMALE: ((45.5, 2.3), (49.0, 1.7), (53.1, 1.36), (45.5, 2.2)),
}

# Widening of the displayed range. The lbs figure is its own constant,
# not a conversion of 5 kg.
RANGE_MARGIN: Dict[WeightUnit, float] = {
    WeightUnit.KG: 5.0,
    WeightUnit.LBS: 11.0,
}

INCHES_AT_FIVE_FEET = 60


class IdealWeightService(IIdealWeightCalculator):
    """Estimate ideal body weight from height.

    Each formula is ``base + slope × inches over 5 ft``, floored at its
    base so short statures never yield a non-physical weight.

    References:
        Devine BJ. Gentamicin therapy. Drug Intell Clin Pharm. 1974;8:650-655.
        Robinson JD, et al. Determination of ideal body weight for drug
        dosage calculations. Am J Hosp Pharm. 1983;40:1016-1019.
        Miller DR, et al. Determining ideal body weight (and mass).
        Am J Hosp Pharm. 1983;40:1622-1625.
        Hamwi GJ. Therapy: changing dietary concepts. 1964.
    """

    def calculate(self, height: float, sex: Sex) -> IdealWeightEstimate:
        """Estimate ideal body weight.

        Args:
            height: Height in cm
            sex: Biological sex

        Returns:
            IdealWeightEstimate: Per-formula estimates in kg

        Example:
            >>> estimate = IdealWeightService().calculate(120.0, Sex.MALE)
            >>> estimate.devine
            50.0
        """
        height = ensure_positive("height", height)
        inches_over_five_feet = height / 2.54 - INCHES_AT_FIVE_FEET

        weights = [
            ensure_finite_result("ideal_weight", max(base + slope * inches_over_five_feet, base))
            for base, slope in FORMULA_CONSTANTS[Sex.parse(sex)]
        ]
        return IdealWeightEstimate(*weights)
