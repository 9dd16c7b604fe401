"""OneRMCalculator - one-repetition maximum facade."""

from typing import Any, Optional

from ...domain.classification.classifier import classify
from ...domain.classification.tables import TRAINING_INTENSITY_CATEGORIES
from ...domain.metrics.calculation.one_rep_max_service import OneRepMaxService
from ...domain.metrics.core.ports.calculators import IOneRepMaxCalculator
from ...domain.shared.rounding import round_half_up
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, resolve_preference
from .results import OneRMResult, TrainingLoadRow


class OneRMCalculator(CalculatorFacade):
    """Estimate one-rep max and a training-load table."""

    metric = "one_rm"

    def __init__(self, one_rep_max_service: Optional[IOneRepMaxCalculator] = None):
        self._one_rep_max_service = one_rep_max_service or OneRepMaxService()

    def compute(self, weight: Any, reps: Any, prefs=None) -> Optional[OneRMResult]:
        """
        Compute one-rep max.

        Args:
            weight: Load lifted, in the caller's weight unit
            reps: Repetitions completed (1-15)
            prefs: UnitPreference (or mapping), defaults to configuration

        Returns:
            OneRMResult, or None when reps is outside 1-15 or inputs are
            missing

        Example:
            >>> OneRMCalculator().compute(100, 5).one_rm
            116.7
        """
        prefs = resolve_preference(prefs)
        try:
            one_rm = self._one_rep_max_service.calculate(
                require_number("weight", weight), require_number("reps", reps)
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        rows = tuple(
            TrainingLoadRow(
                percentage=load.percentage,
                weight=round_half_up(load.weight, 1),
                intensity=classify(load.percentage, TRAINING_INTENSITY_CATEGORIES),
            )
            for load in self._one_rep_max_service.training_loads(one_rm)
        )
        return OneRMResult(
            one_rm=round_half_up(one_rm, 1),
            percentages=rows,
            weight_unit=prefs.weight_unit,
        )


_calculator = OneRMCalculator()


def compute_one_rm(weight: Any, reps: Any, prefs=None) -> Optional[OneRMResult]:
    """Compute one-rep max with the default services. See ``OneRMCalculator.compute``."""
    return _calculator.compute(weight, reps, prefs)
