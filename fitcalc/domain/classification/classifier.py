"""Generic range lookup for metric categories."""

import math
from typing import List, Optional, Sequence, TypedDict

from .category_range import UNKNOWN_CATEGORY, CategoryRange


class ReferenceRow(TypedDict):
    """One line of a category legend."""

    label: str
    description: str
    min: float
    max: Optional[float]


def classify(value: float, ranges: Sequence[CategoryRange]) -> CategoryRange:
    """Return the first range containing value, else ``UNKNOWN_CATEGORY``.

    Ranges are scanned in the order given; the table must already be
    sorted by ``min``. The last range has no upper bound. Values that fall
    in a gap between two authored ranges, or below the first one, are
    unknown.

    Args:
        value: Raw (unrounded) metric value
        ranges: Ordered category table

    Returns:
        CategoryRange: Matching bracket or the unknown sentinel

    Example:
        >>> from .tables import BMI_CATEGORIES
        >>> classify(18.5, BMI_CATEGORIES).label
        'Normal Weight'
        >>> classify(18.45, BMI_CATEGORIES).label
        'Unknown'
    """
    last = len(ranges) - 1
    for index, category in enumerate(ranges):
        upper = math.inf if index == last else category.max
        if category.min <= value <= upper:
            return category
    return UNKNOWN_CATEGORY


def reference_rows(ranges: Sequence[CategoryRange]) -> List[ReferenceRow]:
    """Describe a table for display, with ``max=None`` for the open top."""
    last = len(ranges) - 1
    return [
        ReferenceRow(
            label=category.label,
            description=category.description,
            min=category.min,
            max=None if index == last else category.max,
        )
        for index, category in enumerate(ranges)
    ]
