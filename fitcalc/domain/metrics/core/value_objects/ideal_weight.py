"""IdealWeightEstimate value object - ideal body weight per formula."""

from dataclasses import dataclass
from typing import Callable, Tuple


@dataclass(frozen=True)
class IdealWeightEstimate:
    """Ideal body weight from the four classic height-based formulas.

    Attributes:
        devine: Devine (1974) estimate
        robinson: Robinson (1983) estimate
        miller: Miller (1983) estimate
        hamwi: Hamwi (1964) estimate
    """

    devine: float
    robinson: float
    miller: float
    hamwi: float

    def values(self) -> Tuple[float, float, float, float]:
        """All four estimates, in formula order."""
        return (self.devine, self.robinson, self.miller, self.hamwi)

    @property
    def average(self) -> float:
        """Arithmetic mean of the four estimates."""
        return sum(self.values()) / 4

    def range(self, margin: float) -> Tuple[float, float]:
        """Span of the estimates widened by margin on each side.

        Example:
            >>> IdealWeightEstimate(60.0, 62.0, 64.0, 61.0).range(5.0)
            (55.0, 69.0)
        """
        values = self.values()
        return (min(values) - margin, max(values) + margin)

    def map(self, convert: Callable[[float], float]) -> "IdealWeightEstimate":
        """Apply a conversion to every estimate."""
        return IdealWeightEstimate(*(convert(value) for value in self.values()))
