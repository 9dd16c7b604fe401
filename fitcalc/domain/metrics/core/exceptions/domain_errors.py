"""Domain exceptions for body metric calculations."""

from typing import Any, Optional


class MetricsDomainError(Exception):
    """Base exception for body metric domain errors."""

    pass


class MissingInputError(MetricsDomainError):
    """Raised when a required input is absent, non-numeric or zero."""

    def __init__(self, field: str):
        super().__init__(f"Missing required input: {field}")
        self.field = field


class DomainViolationError(MetricsDomainError):
    """Raised when a present input is outside a formula's valid domain."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        message = f"Invalid value for {field}: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason


class InvalidConfigurationError(MetricsDomainError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, key: str, value: str, allowed: Optional[list] = None):
        message = f"Invalid value for {key}: {value!r}"
        if allowed:
            message = f"{message}, expected one of {', '.join(allowed)}"
        super().__init__(message)
        self.key = key
        self.value = value
