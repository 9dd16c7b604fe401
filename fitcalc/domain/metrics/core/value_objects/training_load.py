"""TrainingLoad value object - working weight at a share of one-rep max."""

from dataclasses import dataclass

TRAINING_PERCENTAGES = (50, 60, 65, 70, 75, 80, 85, 90, 95, 100)


@dataclass(frozen=True)
class TrainingLoad:
    """Working weight for a training intensity.

    Attributes:
        percentage: Share of one-rep max (0-100)
        weight: Load in the unit of the one-rep max
    """

    percentage: int
    weight: float
