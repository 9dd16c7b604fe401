"""structlog setup for applications embedding the calculators."""

import logging
from typing import Optional

import structlog

from ..domain.metrics.core.exceptions.domain_errors import InvalidConfigurationError
from .config import LOG_FORMATS, LOG_LEVELS, get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog processors and level filtering.

    Args:
        level: Level name, defaults to FITCALC_LOG_LEVEL
        fmt: "console" or "json", defaults to FITCALC_LOG_FORMAT

    Raises:
        InvalidConfigurationError: If level or fmt is not recognised
    """
    level_name = (level or get_log_level()).upper()
    fmt = fmt or get_log_format()
    if level_name not in LOG_LEVELS:
        raise InvalidConfigurationError("level", level_name, list(LOG_LEVELS))
    if fmt not in LOG_FORMATS:
        raise InvalidConfigurationError("fmt", fmt, list(LOG_FORMATS))

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        cache_logger_on_first_use=False,
    )
