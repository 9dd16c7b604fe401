"""BMR value objects - Basal Metabolic Rate."""

from dataclasses import dataclass
from typing import Optional

from ..validation import ensure_positive


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    Attributes:
        value: BMR in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is positive and finite.

        Raises:
            DomainViolationError: If BMR is not positive or not finite
        """
        ensure_positive("bmr", self.value)

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: BMR with unit
        """
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        """Developer-friendly representation.

        Returns:
            str: BMR with value
        """
        return f"BMR(value={self.value})"


@dataclass(frozen=True)
class BMREstimate:
    """BMR from each supported equation.

    Attributes:
        mifflin_st_jeor: Mifflin-St Jeor estimate, the primary figure
        harris_benedict: Revised Harris-Benedict estimate
        katch_mcardle: Katch-McArdle estimate, present only when a valid
            body fat percentage was supplied
    """

    mifflin_st_jeor: BMR
    harris_benedict: BMR
    katch_mcardle: Optional[BMR] = None
