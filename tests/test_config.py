"""
Tests for configuration loading and validation.
"""

import pytest
from currency_format.core.models import CurrencyStyle

class TestConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, reload_config):
        """Test defaults without environment variables."""
        config = reload_config()
        assert config.CURRENCY_CODE == 'USD'
        assert config.CURRENCY_SYMBOL is None
        assert config.LOG_LEVEL == 'INFO'
        assert CurrencyStyle.from_config() == CurrencyStyle.preset('USD')

    def test_preset_code(self, reload_config):
        """Test a preset code selects its style."""
        reload_config(CURRENCY_CODE='eur')
        assert CurrencyStyle.from_config() == CurrencyStyle.preset('EUR')

    def test_overrides_on_preset(self, reload_config):
        """Test explicit settings override the preset."""
        reload_config(CURRENCY_CODE='USD', CURRENCY_SYMBOL='US$ ', CURRENCY_GROUP_SEPARATOR=' ')
        style = CurrencyStyle.from_config()
        assert style.symbol == 'US$ '
        assert style.group_separator == ' '
        assert style.decimal_separator == '.'
        assert style.code == 'USD'

    def test_custom_currency(self, reload_config):
        """Test an unknown code with every field given."""
        reload_config(CURRENCY_CODE='chf', CURRENCY_SYMBOL='CHF ',
                      CURRENCY_GROUP_SEPARATOR="'", CURRENCY_DECIMAL_SEPARATOR='.')
        assert CurrencyStyle.from_config() == CurrencyStyle('CHF ', "'", '.', 'CHF')

    def test_unknown_code_missing_fields(self, reload_config):
        """Test an unknown code without style fields fails validation."""
        with pytest.raises(ValueError, match="Unknown CURRENCY_CODE 'XYZ'"):
            reload_config(CURRENCY_CODE='XYZ', CURRENCY_SYMBOL='X')

    def test_invalid_separators(self, reload_config):
        """Test clashing separators fail validation."""
        with pytest.raises(ValueError, match="Group and decimal separator are both ','"):
            reload_config(CURRENCY_CODE='USD', CURRENCY_DECIMAL_SEPARATOR=',')

    def test_invalid_log_level(self, reload_config):
        """Test an unknown log level fails validation."""
        with pytest.raises(ValueError, match="LOG_LEVEL 'LOUD'"):
            reload_config(LOG_LEVEL='LOUD')

    def test_errors_collected(self, reload_config):
        """Test every problem is reported together."""
        with pytest.raises(ValueError) as exc_info:
            reload_config(CURRENCY_CODE='USD', CURRENCY_DECIMAL_SEPARATOR='', LOG_LEVEL='LOUD')
        message = str(exc_info.value)
        assert message.startswith("Configuration errors:")
        assert "- Decimal separator cannot be empty" in message
        assert "- LOG_LEVEL 'LOUD' is not a valid logging level" in message
