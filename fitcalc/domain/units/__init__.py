"""Unit conversion subsystem."""

from .conversion import (
    CM_PER_INCH,
    KJ_PER_KCAL,
    LBS_PER_KG,
    convert_energy,
    convert_height,
    convert_weight,
)
from .value_objects import EnergyUnit, HeightUnit, UnitPreference, WeightUnit

__all__ = [
    "WeightUnit",
    "HeightUnit",
    "EnergyUnit",
    "UnitPreference",
    "convert_weight",
    "convert_height",
    "convert_energy",
    "LBS_PER_KG",
    "CM_PER_INCH",
    "KJ_PER_KCAL",
]
