"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass

from ..validation import ensure_positive


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR x activity factor

    Attributes:
        value: TDEE in kcal/day (must be positive)
        activity_factor: Multiplier that was applied to BMR
    """

    value: float
    activity_factor: float = 1.0

    def __post_init__(self) -> None:
        """Validate TDEE is positive and finite.

        Raises:
            DomainViolationError: If TDEE is not positive or not finite
        """
        ensure_positive("tdee", self.value)

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: TDEE with unit
        """
        return f"{self.value:.0f} kcal/day"
