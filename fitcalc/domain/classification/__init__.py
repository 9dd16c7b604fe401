"""Category classification for metric values."""

from .category_range import UNKNOWN_CATEGORY, CategoryRange
from .classifier import ReferenceRow, classify, reference_rows
from .tables import (
    BMI_CATEGORIES,
    BMR_CATEGORIES,
    BODY_FAT_CATEGORIES,
    TDEE_CATEGORIES,
    TRAINING_INTENSITY_CATEGORIES,
    CategoryTable,
)

__all__ = [
    "CategoryRange",
    "CategoryTable",
    "UNKNOWN_CATEGORY",
    "ReferenceRow",
    "classify",
    "reference_rows",
    "BMI_CATEGORIES",
    "BODY_FAT_CATEGORIES",
    "BMR_CATEGORIES",
    "TDEE_CATEGORIES",
    "TRAINING_INTENSITY_CATEGORIES",
]
