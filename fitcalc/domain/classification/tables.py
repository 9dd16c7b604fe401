"""
Category tables.

Static, ordered brackets per metric. Boundaries are the published ones;
tables with strict "below X" thresholds use the largest float under X as
the inclusive upper bound.
"""

import math
from typing import Dict, Tuple

from ..metrics.core.value_objects.sex import Sex
from .category_range import CategoryRange

CategoryTable = Tuple[CategoryRange, ...]


def _below(bound: float) -> float:
    return math.nextafter(bound, -math.inf)


BMI_CATEGORIES: CategoryTable = (
    CategoryRange(0, 18.4, "Underweight", "Below normal weight"),
    CategoryRange(18.5, 24.9, "Normal Weight", "Healthy weight range"),
    CategoryRange(25, 29.9, "Overweight", "Above normal weight"),
    CategoryRange(30, 100, "Obese", "Significantly above normal weight"),
)

_ESSENTIAL_FAT = "Minimum fat needed for basic physical and physiological health"
_OBESE_FAT = "Above average, may indicate health risks"

BODY_FAT_CATEGORIES: Dict[Sex, CategoryTable] = {
    Sex.MALE: (
        CategoryRange(2, 5, "Essential Fat", _ESSENTIAL_FAT),
        CategoryRange(6, 13, "Athletes", "Typical range for male athletes"),
        CategoryRange(14, 17, "Fitness", "Fit, non-athlete individuals"),
        CategoryRange(18, 24, "Average", "Acceptable range for average men"),
        CategoryRange(25, 100, "Obese", _OBESE_FAT),
    ),
    Sex.FEMALE: (
        CategoryRange(10, 13, "Essential Fat", _ESSENTIAL_FAT),
        CategoryRange(14, 20, "Athletes", "Typical range for female athletes"),
        CategoryRange(21, 24, "Fitness", "Fit, non-athlete individuals"),
        CategoryRange(25, 31, "Average", "Acceptable range for average women"),
        CategoryRange(32, 100, "Obese", _OBESE_FAT),
    ),
}

# Mifflin-St Jeor kcal/day
BMR_CATEGORIES: CategoryTable = (
    CategoryRange(0, _below(1200), "Low Metabolic Rate", "Well below typical resting needs"),
    CategoryRange(1200, _below(1500), "Below Average", "Lower than typical resting needs"),
    CategoryRange(1500, _below(1800), "Average", "Typical resting energy needs"),
    CategoryRange(1800, _below(2200), "Above Average", "Higher than typical resting needs"),
    CategoryRange(2200, math.inf, "High Metabolic Rate", "Well above typical resting needs"),
)

# kcal/day
TDEE_CATEGORIES: CategoryTable = (
    CategoryRange(0, _below(1500), "Low Energy Needs", "Under 1500 kcal per day"),
    CategoryRange(1500, _below(2000), "Moderate Energy Needs", "1500 to 2000 kcal per day"),
    CategoryRange(2000, _below(2500), "High Energy Needs", "2000 to 2500 kcal per day"),
    CategoryRange(2500, math.inf, "Very High Energy Needs", "2500 kcal per day or more"),
)

# Percent of one-rep max
TRAINING_INTENSITY_CATEGORIES: CategoryTable = (
    CategoryRange(0, _below(60), "Warm-up", "Warm-up, technique work"),
    CategoryRange(60, _below(70), "Light", "Volume training, endurance"),
    CategoryRange(70, _below(80), "Moderate", "Hypertrophy, strength endurance"),
    CategoryRange(80, _below(90), "Heavy", "Strength training"),
    CategoryRange(90, 100, "Max Effort", "Max strength, powerlifting"),
)
