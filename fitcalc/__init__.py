"""
fitcalc - unit-aware body metric calculators.

Usage:

    from fitcalc import UnitPreference, compute_bmi

    result = compute_bmi(70, 170, UnitPreference.metric())
    result.bmi             # 24.2
    result.category.label  # "Normal Weight"
"""

from .application.activity_catalog import CustomActivityCatalog
from .application.calculators import (
    compute_bmi,
    compute_bmr,
    compute_body_fat,
    compute_goal,
    compute_ideal_weight,
    compute_one_rm,
    compute_tdee,
)
from .domain.metrics.core.exceptions import (
    DomainViolationError,
    InvalidConfigurationError,
    MetricsDomainError,
    MissingInputError,
)
from .domain.metrics.core.value_objects import ActivityLevel, Sex
from .domain.units import EnergyUnit, HeightUnit, UnitPreference, WeightUnit
from .infrastructure import configure_logging, load_environment

__version__ = "0.1.0"

__all__ = [
    "compute_bmi",
    "compute_bmr",
    "compute_tdee",
    "compute_body_fat",
    "compute_ideal_weight",
    "compute_one_rm",
    "compute_goal",
    "CustomActivityCatalog",
    "UnitPreference",
    "WeightUnit",
    "HeightUnit",
    "EnergyUnit",
    "Sex",
    "ActivityLevel",
    "MetricsDomainError",
    "MissingInputError",
    "DomainViolationError",
    "InvalidConfigurationError",
    "configure_logging",
    "load_environment",
]
