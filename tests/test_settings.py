"""
Settings Tests - Unit Tests for Environment Configuration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nameprice.config.settings (Settings class)
- pydantic (ValidationError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from pydantic import ValidationError  # Raised for invalid settings values

from nameprice.config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NAMEPRICE_SCALE_DIGITS", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.scale_digits_of_precision == 20
        assert settings.log_level == "INFO"
        assert settings.log_stdout is True
        assert settings.log_backup_count == 5

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NAMEPRICE_SCALE_DIGITS", "12")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.scale_digits_of_precision == 12
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("digits", ["0", "41", "abc"])
    def test_invalid_scale_digits(self, monkeypatch, digits):
        monkeypatch.setenv("NAMEPRICE_SCALE_DIGITS", digits)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
