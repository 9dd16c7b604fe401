"""BMRService - Basal Metabolic Rate calculation."""

from typing import Optional

import structlog

from ..core.exceptions.domain_errors import DomainViolationError
from ..core.ports.calculators import IBMRCalculator
from ..core.validation import ensure_positive
from ..core.value_objects.bmr import BMR, BMREstimate
from ..core.value_objects.body_stats import BodyStats
from ..core.value_objects.sex import Sex

logger = structlog.get_logger(__name__)

# Katch-McArdle is only meaningful for 0 < body fat < 50
MAX_BODY_FAT_FOR_LEAN_MASS = 50.0


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate.

    Mifflin-St Jeor is the primary equation, considered the most accurate
    for normal-weight and overweight individuals:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    Revised Harris-Benedict:
        Men:   BMR = 88.362 + 13.397 × weight + 4.799 × height - 5.677 × age
        Women: BMR = 447.593 + 9.247 × weight + 3.098 × height - 4.330 × age

    Katch-McArdle, from lean body mass:
        BMR = 370 + 21.6 × weight × (1 - body_fat / 100)

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
        Roza AM, Shizgal HM. The Harris Benedict equation reevaluated.
        Am J Clin Nutr. 1984;40(1):168-182.
    """

    def calculate(self, stats: BodyStats) -> BMR:
        """Calculate Mifflin-St Jeor BMR from body stats.

        Args:
            stats: Body measurements (weight, height, age, sex)

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> stats = BodyStats(weight=80.0, height=180.0, age=30, sex=Sex.MALE)
            >>> service.calculate(stats).value
            1780.0
        """
        return self.mifflin_st_jeor(stats)

    def mifflin_st_jeor(self, stats: BodyStats) -> BMR:
        """Mifflin-St Jeor equation."""
        # Base calculation (common for both sexes)
        base = 10 * stats.weight + 6.25 * stats.height - 5 * stats.age

        if stats.sex == Sex.MALE:
            return BMR(value=base + 5)
        return BMR(value=base - 161)

    def harris_benedict(self, stats: BodyStats) -> BMR:
        """Revised Harris-Benedict equation."""
        if stats.sex == Sex.MALE:
            value = 88.362 + 13.397 * stats.weight + 4.799 * stats.height - 5.677 * stats.age
        else:
            value = 447.593 + 9.247 * stats.weight + 3.098 * stats.height - 4.330 * stats.age
        return BMR(value=value)

    def katch_mcardle(self, weight: float, body_fat: float) -> BMR:
        """Katch-McArdle equation.

        Args:
            weight: Body weight in kg
            body_fat: Body fat percentage, strictly between 0 and 50

        Raises:
            DomainViolationError: If body fat is outside (0, 50)
        """
        weight = ensure_positive("weight", weight)
        body_fat = ensure_positive("body_fat", body_fat)
        if body_fat >= MAX_BODY_FAT_FOR_LEAN_MASS:
            raise DomainViolationError(
                "body_fat", body_fat, f"must be below {MAX_BODY_FAT_FOR_LEAN_MASS}"
            )

        lean_body_mass = weight * (1 - body_fat / 100)
        return BMR(value=370 + 21.6 * lean_body_mass)

    def estimate(self, stats: BodyStats, body_fat: Optional[float] = None) -> BMREstimate:
        """Calculate BMR with every applicable equation.

        Katch-McArdle is left out, not zeroed, when body fat is missing or
        outside its domain.

        Args:
            stats: Body measurements
            body_fat: Optional body fat percentage

        Returns:
            BMREstimate: Per-equation estimates
        """
        katch_mcardle = None
        if body_fat is not None:
            try:
                katch_mcardle = self.katch_mcardle(stats.weight, body_fat)
            except DomainViolationError as e:
                logger.debug("katch_mcardle_skipped", body_fat=body_fat, reason=str(e))

        return BMREstimate(
            mifflin_st_jeor=self.mifflin_st_jeor(stats),
            harris_benedict=self.harris_benedict(stats),
            katch_mcardle=katch_mcardle,
        )
