"""BodyFatService - US Navy circumference method."""

import math
from typing import Optional

from ..core.exceptions.domain_errors import DomainViolationError, MissingInputError
from ..core.ports.calculators import IBodyFatCalculator
from ..core.validation import ensure_positive
from ..core.value_objects.sex import Sex


class BodyFatService(IBodyFatCalculator):
    """Estimate body fat percentage from body circumferences.

    Formula (all lengths in cm):
        Men:   86.010 × log10(waist - neck) - 70.041 × log10(height) + 36.76
        Women: 163.205 × log10(waist + hip - neck) - 97.684 × log10(height) - 78.387

    The result is clamped to [0, 100].

    References:
        Hodgdon JA, Beckett MB. Prediction of percent body fat for U.S. Navy
        men and women from body circumferences and height. Naval Health
        Research Center, 1984. Reports 84-11 and 84-29.
    """

    def calculate(
        self,
        sex: Sex,
        height: float,
        waist: float,
        neck: float,
        hip: Optional[float] = None,
    ) -> float:
        """Estimate body fat percentage.

        Args:
            sex: Biological sex
            height: Height in cm
            waist: Waist circumference in cm
            neck: Neck circumference in cm
            hip: Hip circumference in cm (required for women)

        Returns:
            float: Body fat percentage (0-100)

        Raises:
            MissingInputError: If hip is missing for a woman
            DomainViolationError: If the girth combination is not positive
        """
        sex = Sex.parse(sex)
        height = ensure_positive("height", height)
        waist = ensure_positive("waist", waist)
        neck = ensure_positive("neck", neck)

        if sex == Sex.MALE:
            girth = waist - neck
            if girth <= 0:
                raise DomainViolationError("waist", waist, "waist must exceed neck")
            body_fat = 86.01 * math.log10(girth) - 70.041 * math.log10(height) + 36.76
        else:
            if hip is None:
                raise MissingInputError("hip")
            hip = ensure_positive("hip", hip)
            girth = waist + hip - neck
            if girth <= 0:
                raise DomainViolationError("waist", waist, "waist plus hip must exceed neck")
            body_fat = (
                163.205 * math.log10(girth) - 97.684 * math.log10(height) - 78.387
            )

        return max(0.0, min(100.0, body_fat))
