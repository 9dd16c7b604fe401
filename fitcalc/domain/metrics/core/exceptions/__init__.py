"""Exceptions for body metric domain."""

from .domain_errors import (
    DomainViolationError,
    InvalidConfigurationError,
    MetricsDomainError,
    MissingInputError,
)

__all__ = [
    "MetricsDomainError",
    "MissingInputError",
    "DomainViolationError",
    "InvalidConfigurationError",
]
