"""Configuration utilities for infrastructure layer."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

from dotenv import load_dotenv

from ..domain.metrics.core.exceptions.domain_errors import InvalidConfigurationError
from ..domain.units.value_objects import EnergyUnit, HeightUnit, UnitPreference, WeightUnit

E = TypeVar("E", bound=Enum)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


def load_environment(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Existing environment variables win over values from the file.

    Args:
        env_file: Path to the file, defaults to ./.env

    Returns:
        True if a file was found and loaded
    """
    path = Path(env_file) if env_file else Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path)


def _read_unit(key: str, unit_type: Type[E], default: E) -> E:
    raw = os.getenv(key)
    if not raw or not raw.strip():
        return default
    for member in unit_type:
        if member.value.lower() == raw.strip().lower():
            return member
    raise InvalidConfigurationError(key, raw, [member.value for member in unit_type])


def get_default_unit_preference() -> UnitPreference:
    """
    Get the unit preference used when a caller supplies none.

    Reads FITCALC_WEIGHT_UNIT, FITCALC_HEIGHT_UNIT and FITCALC_ENERGY_UNIT
    (case-insensitive), each falling back to kg / cm / kcal.

    Returns:
        UnitPreference built from the environment

    Raises:
        InvalidConfigurationError: If a variable names an unknown unit
    """
    return UnitPreference(
        weight_unit=_read_unit("FITCALC_WEIGHT_UNIT", WeightUnit, WeightUnit.KG),
        height_unit=_read_unit("FITCALC_HEIGHT_UNIT", HeightUnit, HeightUnit.CM),
        energy_unit=_read_unit("FITCALC_ENERGY_UNIT", EnergyUnit, EnergyUnit.KCAL),
    )


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Level from FITCALC_LOG_LEVEL, defaults to "INFO"
    """
    raw = os.getenv("FITCALC_LOG_LEVEL", "INFO").strip().upper()
    if raw not in LOG_LEVELS:
        raise InvalidConfigurationError("FITCALC_LOG_LEVEL", raw, list(LOG_LEVELS))
    return raw


def get_log_format() -> str:
    """
    Get log renderer name.

    Returns:
        "console" or "json" from FITCALC_LOG_FORMAT, defaults to "console"
    """
    raw = os.getenv("FITCALC_LOG_FORMAT", "console").strip().lower()
    if raw not in LOG_FORMATS:
        raise InvalidConfigurationError("FITCALC_LOG_FORMAT", raw, list(LOG_FORMATS))
    return raw
