"""OneRepMaxService - Epley one-repetition maximum."""

from typing import Tuple

from ..core.ports.calculators import IOneRepMaxCalculator
from ..core.validation import ensure_between, ensure_finite_result, ensure_positive
from ..core.value_objects.training_load import TRAINING_PERCENTAGES, TrainingLoad

MIN_REPS = 1
MAX_REPS = 15


class OneRepMaxService(IOneRepMaxCalculator):
    """Estimate one-rep max with the Epley formula.

    Formula:
        1RM = weight × (1 + reps / 30)

    Only defined for 1 to 15 repetitions; beyond that the estimate is
    unreliable. Works in whatever unit the weight is given in.
    """

    def calculate(self, weight: float, reps: int) -> float:
        """Estimate one-rep max.

        Raises:
            DomainViolationError: If reps is outside [1, 15] or the estimate
                does not fit in a float

        Example:
            >>> round(OneRepMaxService().calculate(100.0, 5), 2)
            116.67
        """
        weight = ensure_positive("weight", weight)
        reps = ensure_between("reps", reps, MIN_REPS, MAX_REPS)
        return ensure_finite_result("one_rm", weight * (1 + reps / 30))

    def training_loads(self, one_rm: float) -> Tuple[TrainingLoad, ...]:
        """Working weights at the standard training percentages."""
        return tuple(
            TrainingLoad(percentage=percentage, weight=one_rm * (percentage / 100))
            for percentage in TRAINING_PERCENTAGES
        )
