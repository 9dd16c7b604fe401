"""Unit test configuration.

Unit tests run against the pure calculators only: no .env file is read
and structlog starts from its defaults for every test.
"""

import pytest
import structlog

FITCALC_ENV_VARS = (
    "FITCALC_WEIGHT_UNIT",
    "FITCALC_HEIGHT_UNIT",
    "FITCALC_ENERGY_UNIT",
    "FITCALC_LOG_LEVEL",
    "FITCALC_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Clear fitcalc settings so defaults (kg/cm/kcal) apply."""
    for name in FITCALC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    structlog.reset_defaults()
