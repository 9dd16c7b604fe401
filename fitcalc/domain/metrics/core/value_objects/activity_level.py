"""ActivityLevel value object - fixed activity multipliers for TDEE."""

from enum import Enum
from typing import Optional

from ..validation import ensure_between

MIN_ACTIVITY_FACTOR = 1.0
MAX_ACTIVITY_FACTOR = 3.0


class ActivityLevel(str, Enum):
    """The five standard lifestyle multipliers applied to BMR.

    Anything outside this table is expressed as a ``CustomActivity`` or a
    bare factor in [1.0, 3.0].
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """BMR multiplier for this level.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return _LEVEL_TABLE[self][0]

    def description(self) -> str:
        """Label shown next to the level in an activity picker."""
        return _LEVEL_TABLE[self][1]

    @classmethod
    def from_factor(cls, factor: float) -> Optional["ActivityLevel"]:
        """Return the fixed level using exactly this multiplier, if any.

        Example:
            >>> ActivityLevel.from_factor(1.375)
            <ActivityLevel.LIGHT: 'light'>
        """
        for level, (multiplier, _) in _LEVEL_TABLE.items():
            if multiplier == factor:
                return level
        return None


_LEVEL_TABLE = {
    ActivityLevel.SEDENTARY: (1.2, "Sedentary (little/no exercise)"),
    ActivityLevel.LIGHT: (1.375, "Light (light exercise 1-3 days/week)"),
    ActivityLevel.MODERATE: (1.55, "Moderate (moderate exercise 3-5 days/week)"),
    ActivityLevel.ACTIVE: (1.725, "Active (hard exercise 6-7 days/week)"),
    ActivityLevel.VERY_ACTIVE: (1.9, "Very Active (very hard exercise, physical job)"),
}


def validate_activity_factor(factor: float) -> float:
    """Check a free-form activity multiplier lies in [1.0, 3.0].

    Raises:
        DomainViolationError: If factor is outside the supported range
    """
    return ensure_between("activity_factor", factor, MIN_ACTIVITY_FACTOR, MAX_ACTIVITY_FACTOR)
