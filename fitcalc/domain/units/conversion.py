"""
Unit conversion.

Pure conversions between the supported units. No rounding happens here;
callers round once when presenting a result.
"""

from typing import Union

from .value_objects import EnergyUnit, HeightUnit, WeightUnit

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
KJ_PER_KCAL = 4.184


def convert_weight(
    value: float,
    from_unit: Union[WeightUnit, str],
    to_unit: Union[WeightUnit, str],
) -> float:
    """Convert a body mass between kg and lbs.

    Example:
        >>> round(convert_weight(10.0, "kg", "lbs"), 4)
        22.0462
    """
    from_unit = WeightUnit(from_unit)
    to_unit = WeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == WeightUnit.KG:
        return value * LBS_PER_KG
    return value / LBS_PER_KG


def convert_height(
    value: float,
    from_unit: Union[HeightUnit, str],
    to_unit: Union[HeightUnit, str],
) -> float:
    """Convert a length between cm and inches.

    Example:
        >>> convert_height(10.0, "inches", "cm")
        25.4
    """
    from_unit = HeightUnit(from_unit)
    to_unit = HeightUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == HeightUnit.INCHES:
        return value * CM_PER_INCH
    return value / CM_PER_INCH


def convert_energy(
    value: float,
    from_unit: Union[EnergyUnit, str],
    to_unit: Union[EnergyUnit, str],
) -> float:
    """Convert an energy amount between kcal and kJ.

    Example:
        >>> convert_energy(500.0, "kcal", "kJ")
        2092.0
    """
    from_unit = EnergyUnit(from_unit)
    to_unit = EnergyUnit(to_unit)
    if from_unit == to_unit:
        return value
    if from_unit == EnergyUnit.KCAL:
        return value * KJ_PER_KCAL
    return value / KJ_PER_KCAL
