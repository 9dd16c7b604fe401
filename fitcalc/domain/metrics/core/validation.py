"""Numeric domain checks shared by the metric value objects and services."""

import math

from .exceptions.domain_errors import DomainViolationError


def _ensure_number(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DomainViolationError(field, value, "must be a number")
    if not math.isfinite(value):
        raise DomainViolationError(field, value, "must be finite")
    return float(value)


def ensure_positive(field: str, value: float) -> float:
    """Return value as float if it is finite and strictly positive."""
    value = _ensure_number(field, value)
    if value <= 0:
        raise DomainViolationError(field, value, "must be positive")
    return value


def ensure_between(field: str, value: float, low: float, high: float) -> float:
    """Return value as float if it is finite and within [low, high]."""
    value = _ensure_number(field, value)
    if not (low <= value <= high):
        raise DomainViolationError(field, value, f"must be between {low} and {high}")
    return value


def ensure_finite_result(field: str, value: float) -> float:
    """Return a computed value if it did not overflow to inf or nan."""
    if not math.isfinite(value):
        raise DomainViolationError(field, value, "is out of range")
    return value
