"""Unit tests for environment configuration."""

import pytest

from fitcalc.domain.metrics.core.exceptions import InvalidConfigurationError
from fitcalc.domain.units import EnergyUnit, HeightUnit, UnitPreference, WeightUnit
from fitcalc.infrastructure.config import (
    get_default_unit_preference,
    get_log_format,
    get_log_level,
    load_environment,
)


class TestDefaultUnitPreference:
    """Test unit preference from environment variables."""

    def test_defaults(self):
        """Test metric units when nothing is set."""
        assert get_default_unit_preference() == UnitPreference()

    def test_from_environment(self, monkeypatch):
        """Test each variable is read case-insensitively."""
        monkeypatch.setenv("FITCALC_WEIGHT_UNIT", "LBS")
        monkeypatch.setenv("FITCALC_HEIGHT_UNIT", "inches")
        monkeypatch.setenv("FITCALC_ENERGY_UNIT", "KJ")

        prefs = get_default_unit_preference()

        assert prefs.weight_unit == WeightUnit.LBS
        assert prefs.height_unit == HeightUnit.INCHES
        assert prefs.energy_unit == EnergyUnit.KJ

    def test_blank_uses_default(self, monkeypatch):
        """Test empty values fall back to defaults."""
        monkeypatch.setenv("FITCALC_WEIGHT_UNIT", "  ")

        assert get_default_unit_preference().weight_unit == WeightUnit.KG

    def test_unknown_unit(self, monkeypatch):
        """Test unknown units raise InvalidConfigurationError."""
        monkeypatch.setenv("FITCALC_WEIGHT_UNIT", "stone")

        with pytest.raises(InvalidConfigurationError) as exc_info:
            get_default_unit_preference()

        assert exc_info.value.key == "FITCALC_WEIGHT_UNIT"
        assert exc_info.value.value == "stone"


class TestLoggingSettings:
    """Test log level and format settings."""

    def test_defaults(self):
        """Test INFO and console by default."""
        assert get_log_level() == "INFO"
        assert get_log_format() == "console"

    def test_normalised(self, monkeypatch):
        """Test values are normalised."""
        monkeypatch.setenv("FITCALC_LOG_LEVEL", "debug")
        monkeypatch.setenv("FITCALC_LOG_FORMAT", "JSON")

        assert get_log_level() == "DEBUG"
        assert get_log_format() == "json"

    def test_invalid_level(self, monkeypatch):
        """Test unknown level."""
        monkeypatch.setenv("FITCALC_LOG_LEVEL", "verbose")

        with pytest.raises(InvalidConfigurationError):
            get_log_level()

    def test_invalid_format(self, monkeypatch):
        """Test unknown format."""
        monkeypatch.setenv("FITCALC_LOG_FORMAT", "xml")

        with pytest.raises(InvalidConfigurationError):
            get_log_format()


class TestLoadEnvironment:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported, not raised."""
        assert load_environment(tmp_path / ".env") is False

    def test_loads_file(self, tmp_path, monkeypatch):
        """Test variables from the file become defaults."""
        # Register the variable so monkeypatch removes what the file sets
        monkeypatch.setenv("FITCALC_ENERGY_UNIT", "kcal")
        monkeypatch.delenv("FITCALC_ENERGY_UNIT")
        env_file = tmp_path / ".env"
        env_file.write_text("FITCALC_ENERGY_UNIT=kJ\n")

        assert load_environment(env_file) is True
        assert get_default_unit_preference().energy_unit == EnergyUnit.KJ

    def test_environment_wins(self, tmp_path, monkeypatch):
        """Test existing variables are not overridden."""
        monkeypatch.setenv("FITCALC_WEIGHT_UNIT", "kg")
        env_file = tmp_path / ".env"
        env_file.write_text("FITCALC_WEIGHT_UNIT=lbs\n")

        load_environment(env_file)

        assert get_default_unit_preference().weight_unit == WeightUnit.KG
