"""BodyStats value object - anthropometric inputs in metric units."""

from dataclasses import dataclass

from ..validation import ensure_between, ensure_positive
from .sex import Sex

MIN_AGE = 1
MAX_AGE = 120


@dataclass(frozen=True)
class BodyStats:
    """Body measurements needed by the BMR equations.

    Always expressed in canonical metric units; conversion from the
    caller's units happens before construction.

    Attributes:
        weight: Body weight in kilograms
        height: Height in centimeters
        age: Age in years (1-120)
        sex: Biological sex
    """

    weight: float
    height: float
    age: float
    sex: Sex

    def __post_init__(self) -> None:
        """Validate measurements.

        Raises:
            DomainViolationError: If any value is outside its domain
        """
        ensure_positive("weight", self.weight)
        ensure_positive("height", self.height)
        ensure_between("age", self.age, MIN_AGE, MAX_AGE)
        object.__setattr__(self, "sex", Sex.parse(self.sex))
