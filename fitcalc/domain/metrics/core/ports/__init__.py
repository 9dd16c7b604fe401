"""Ports for body metric domain."""

from .calculators import (
    ActivitySelector,
    IBMICalculator,
    IBMRCalculator,
    IBodyFatCalculator,
    IIdealWeightCalculator,
    IOneRepMaxCalculator,
    ITDEECalculator,
)

__all__ = [
    "ActivitySelector",
    "IBMICalculator",
    "IBMRCalculator",
    "ITDEECalculator",
    "IBodyFatCalculator",
    "IIdealWeightCalculator",
    "IOneRepMaxCalculator",
]
