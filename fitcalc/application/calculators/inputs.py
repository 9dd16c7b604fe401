"""Input checks applied before any unit conversion."""

import math
from numbers import Real
from typing import Any, Mapping, Optional, Union

from ...domain.metrics.core.exceptions.domain_errors import MissingInputError
from ...domain.metrics.core.value_objects.sex import Sex
from ...domain.units.value_objects import UnitPreference
from ...infrastructure.config import get_default_unit_preference


def require_number(field: str, value: Any) -> float:
    """Return value as float, treating absent, non-numeric, NaN and zero as missing."""
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        raise MissingInputError(field)
    value = float(value)
    if math.isnan(value) or value == 0:
        raise MissingInputError(field)
    return value


def optional_number(value: Any) -> Optional[float]:
    """Like ``require_number`` but returns None instead of raising."""
    try:
        return require_number("optional", value)
    except MissingInputError:
        return None


def require_sex(value: Union[Sex, str, None]) -> Sex:
    """Parse the selected sex; a blank selection is missing input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingInputError("gender")
    return Sex.parse(value)


def resolve_preference(prefs: Union[UnitPreference, Mapping[str, str], None]) -> UnitPreference:
    """Use the caller's units, or the configured default when none given."""
    if prefs is None:
        return get_default_unit_preference()
    if isinstance(prefs, UnitPreference):
        return prefs
    return UnitPreference(**prefs)
