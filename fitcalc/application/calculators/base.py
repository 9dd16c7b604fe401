"""Shared behaviour of the per-metric calculators."""

import structlog

from ...domain.metrics.core.exceptions.domain_errors import (
    DomainViolationError,
    MetricsDomainError,
    MissingInputError,
)
from ...domain.metrics.core.validation import ensure_finite_result
from ...domain.shared.rounding import round_energy
from ...domain.units.conversion import convert_energy
from ...domain.units.value_objects import EnergyUnit

logger = structlog.get_logger(__name__)

# User-input problems: the calculator answers "no result" instead of raising
INPUT_ERRORS = (MissingInputError, DomainViolationError)


class CalculatorFacade:
    """
    Base for calculators that turn caller-unit inputs into rounded results.

    Flow of every ``compute``:
    1. Check inputs are present
    2. Convert to metric units
    3. Run the domain formula(s)
    4. Classify the raw value
    5. Convert back to the caller's units and round
    """

    metric = "metric"

    def _not_computable(self, error: MetricsDomainError) -> None:
        logger.debug(
            "not_computable",
            metric=self.metric,
            field=getattr(error, "field", None),
            reason=str(error),
        )
        return None

    @staticmethod
    def _energy(kcal: float, unit: EnergyUnit) -> int:
        """Present a kcal figure in the caller's energy unit."""
        return round_energy(
            ensure_finite_result("energy", convert_energy(kcal, EnergyUnit.KCAL, unit))
        )
