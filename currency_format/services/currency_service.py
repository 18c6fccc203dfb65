"""
Currency formatter service binding a currency style to the format/unformat utilities.
"""

import logging
import re
from typing import Dict, Any, Optional

from ..core.models import CurrencyStyle
from ..utils.formatters import UnformatPattern, currency_format, currency_unformat
from ..utils.helpers import clean_amount_input, stringify_amount
from ..utils.validators import is_numeric_string, validate_pattern

logger = logging.getLogger(__name__)

# First digit of a display string; a minus sign before it marks a negative amount
_FIRST_DIGIT = re.compile(r'[0-9]')

class CurrencyFormatter:
    """
    Formatter for display strings in a single currency style.
    """

    def __init__(self, style: CurrencyStyle = None, pattern: UnformatPattern = None):
        if not validate_pattern(pattern):
            raise ValueError(f"Invalid unformat pattern: {pattern!r}")
        self.style = style or CurrencyStyle.from_config()
        self.pattern = pattern

    def format(self, value: str) -> str:
        """Format a numeric string in this style."""
        return currency_format(
            value,
            self.style.symbol,
            self.style.group_separator,
            self.style.decimal_separator
        )

    def unformat(self, value: str) -> str:
        """Strip this style's decoration from a display string."""
        pattern = self.pattern if self.pattern is not None else self.style.unformat_pattern()
        return currency_unformat(value, pattern)

    def _format_signed(self, value: str) -> str:
        """Format a numeric string, keeping a leading minus sign out of the grouping."""
        if value.startswith('-'):
            return '-' + self.format(value[1:])
        return self.format(value)

    def format_amount(self, amount: float, decimal_places: Optional[int] = None) -> str:
        """
        Format a numeric amount in this style.

        Args:
            amount (float): Amount to display
            decimal_places (int): Fix the amount to this many places first

        Returns:
            str: Formatted currency string
        """
        value = stringify_amount(amount, decimal_places)
        if self.style.decimal_separator != '.':
            value = value.replace('.', self.style.decimal_separator)
        return self._format_signed(value)

    def format_checked(self, value: Any) -> Dict[str, Any]:
        """
        Validate and format a numeric string.

        Args:
            value: Value expected to be a numeric string

        Returns:
            dict: Result with the formatted string, or the validation error
        """
        if not isinstance(value, str):
            return self._failure(value, f"Expected a string, got {type(value).__name__}")

        if not is_numeric_string(value, self.style.decimal_separator):
            return self._failure(value, f"'{value}' is not a numeric string")

        result = self._format_signed(value)
        logger.debug(f"Formatted {value!r} as {result!r}")
        return {
            'success': True,
            'result': result,
            'input': value
        }

    def unformat_checked(self, value: Any) -> Dict[str, Any]:
        """
        Unformat a display string and validate the remaining number.

        Args:
            value: Value expected to be a display string

        Returns:
            dict: Result with the bare numeric string, or the validation error
        """
        if not isinstance(value, str):
            return self._failure(value, f"Expected a string, got {type(value).__name__}")

        cleaned = clean_amount_input(value)
        result = self.unformat(cleaned)

        first_digit = _FIRST_DIGIT.search(cleaned)
        if first_digit and '-' in cleaned[:first_digit.start()] and not result.startswith('-'):
            result = '-' + result

        if not is_numeric_string(result, self.style.decimal_separator):
            return self._failure(value, f"No single amount found in '{value}'")

        logger.debug(f"Unformatted {value!r} as {result!r}")
        return {
            'success': True,
            'result': result,
            'input': value
        }

    def _failure(self, value: Any, error: str) -> Dict[str, Any]:
        """Build a failed result."""
        logger.warning(f"Currency {self.style.code or 'style'} rejected input: {error}")
        return {
            'success': False,
            'error': error,
            'input': value
        }

# Global formatter instance, created on first use
_default_formatter = None

def get_formatter(style: CurrencyStyle = None) -> CurrencyFormatter:
    """
    Get a currency formatter.

    Args:
        style (CurrencyStyle): Style to bind. Without one, the shared
            formatter for the configured default style is returned.

    Returns:
        CurrencyFormatter: Formatter instance
    """
    global _default_formatter

    if style is not None:
        return CurrencyFormatter(style)

    if _default_formatter is None:
        _default_formatter = CurrencyFormatter()
        logger.info(f"Default currency formatter initialized for {_default_formatter.style.code or 'custom style'}")
    return _default_formatter
