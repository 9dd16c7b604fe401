"""Infrastructure: configuration and logging."""

from .config import get_default_unit_preference, get_log_format, get_log_level, load_environment
from .logging_config import configure_logging

__all__ = [
    "load_environment",
    "get_default_unit_preference",
    "get_log_level",
    "get_log_format",
    "configure_logging",
]
