"""
Unit value objects.

Unit enums for each measurement family and the caller's unit preference.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WeightUnit(str, Enum):
    """Body mass units."""

    KG = "kg"
    LBS = "lbs"


class HeightUnit(str, Enum):
    """Length units, used for stature and body circumferences."""

    CM = "cm"
    INCHES = "inches"


class EnergyUnit(str, Enum):
    """Dietary energy units."""

    KCAL = "kcal"
    KJ = "kJ"


class UnitPreference(BaseModel):
    """
    Caller's preferred unit for each measurement family.

    Supplied by the caller on every calculation; inputs are read in these
    units and results are reported in them. Plain strings are accepted.

    Example:
        >>> prefs = UnitPreference(weight_unit="lbs", height_unit="inches")
        >>> prefs.weight_unit
        <WeightUnit.LBS: 'lbs'>
        >>> UnitPreference().energy_unit
        <EnergyUnit.KCAL: 'kcal'>
    """

    model_config = ConfigDict(frozen=True)

    weight_unit: WeightUnit = Field(default=WeightUnit.KG, description="Weight unit")
    height_unit: HeightUnit = Field(default=HeightUnit.CM, description="Height unit")
    energy_unit: EnergyUnit = Field(default=EnergyUnit.KCAL, description="Energy unit")

    @classmethod
    def metric(cls) -> UnitPreference:
        """kg / cm / kcal."""
        return cls()

    @classmethod
    def imperial(cls) -> UnitPreference:
        """lbs / inches / kcal."""
        return cls(weight_unit=WeightUnit.LBS, height_unit=HeightUnit.INCHES)

    def with_units(self, **changes: str) -> UnitPreference:
        """Return a copy with some units replaced.

        Example:
            >>> UnitPreference().with_units(energy_unit="kJ").energy_unit
            <EnergyUnit.KJ: 'kJ'>
        """
        data = self.model_dump()
        data.update(changes)
        return UnitPreference(**data)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.weight_unit.value}/{self.height_unit.value}/{self.energy_unit.value}"
