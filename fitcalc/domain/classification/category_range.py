"""CategoryRange value object - a labeled bracket of a metric's scale."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryRange:
    """Closed numeric bracket with a label and a description.

    Ranges belong to an ordered table (see ``tables``). The ``max`` of the
    topmost range of a table is only a display value: the classifier
    treats that bracket as unbounded above.

    Attributes:
        min: Lower bound, inclusive
        max: Upper bound, inclusive
        label: Category name (e.g. "Normal Weight")
        description: One-line explanation of the category
    """

    min: float
    max: float
    label: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate bounds are ordered.

        Raises:
            ValueError: If min is greater than max
        """
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} exceeds max {self.max}")

    @property
    def is_known(self) -> bool:
        """False only for the unknown sentinel."""
        return self is not UNKNOWN_CATEGORY

    def contains(self, value: float) -> bool:
        """Check whether value lies within [min, max]."""
        return self.min <= value <= self.max

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: Category label
        """
        return self.label


UNKNOWN_CATEGORY = CategoryRange(min=0.0, max=0.0, label="Unknown", description="")
