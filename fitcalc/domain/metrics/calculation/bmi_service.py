"""BMIService - Body Mass Index calculation."""

from ..core.exceptions.domain_errors import DomainViolationError
from ..core.ports.calculators import IBMICalculator
from ..core.validation import ensure_finite_result, ensure_positive


class BMIService(IBMICalculator):
    """Calculate Body Mass Index.

    Formula:
        BMI = weight(kg) / (height(m))²
    """

    def calculate(self, weight: float, height: float) -> float:
        """Calculate BMI from weight and height.

        Args:
            weight: Body weight in kg
            height: Height in cm

        Returns:
            float: BMI in kg/m²

        Raises:
            DomainViolationError: If weight or height is not positive, or
                the result does not fit in a float

        Example:
            >>> round(BMIService().calculate(70.0, 170.0), 2)
            24.22
        """
        weight = ensure_positive("weight", weight)
        height_m = ensure_positive("height", height) / 100.0
        height_squared = height_m ** 2
        if height_squared == 0:
            raise DomainViolationError("height", height, "too small")
        return ensure_finite_result("bmi", weight / height_squared)
