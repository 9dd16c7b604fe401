"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ActivitySelector, ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel, validate_activity_factor
from ..core.value_objects.bmr import BMR
from ..core.value_objects.custom_activity import CustomActivity
from ..core.value_objects.tdee import TDEE


def resolve_activity_factor(activity: ActivitySelector) -> float:
    """Turn an activity selector into a BMR multiplier.

    Args:
        activity: Fixed activity level, custom activity or a raw factor
            in [1.0, 3.0]

    Returns:
        float: Activity multiplier

    Raises:
        DomainViolationError: If a raw factor is out of range

    Example:
        >>> resolve_activity_factor(ActivityLevel.LIGHT)
        1.375
    """
    if isinstance(activity, ActivityLevel):
        return activity.pal_multiplier()
    if isinstance(activity, CustomActivity):
        return activity.factor
    return validate_activity_factor(activity)


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by an activity multiplier.

    Formula:
        TDEE = BMR × activity factor

    Fixed multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Active: 1.725 (hard exercise 6-7 days/week)
        - Very Active: 1.9 (very hard exercise + physical job)

    Custom activities and raw factors may use any value in [1.0, 3.0].
    """

    def calculate(self, bmr: BMR, activity: ActivitySelector) -> TDEE:
        """Calculate TDEE from BMR and activity.

        Args:
            bmr: Basal metabolic rate
            activity: Fixed activity level, custom activity or raw factor

        Returns:
            TDEE: Total daily energy expenditure in kcal/day

        Example:
            >>> service = TDEEService()
            >>> bmr = BMR(value=1780.0)
            >>> service.calculate(bmr, ActivityLevel.MODERATE).value
            2759.0
        """
        factor = resolve_activity_factor(activity)
        return TDEE(value=bmr.value * factor, activity_factor=factor)
