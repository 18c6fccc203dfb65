"""
Currency style models and preset definitions for currency_format.
"""

import re
from typing import Dict, Any, Optional

from ..utils.helpers import build_unformat_pattern
from ..utils.validators import validate_separators

class CurrencyStyle:
    """
    Currency style bundling the symbol and separators used for display.
    """

    def __init__(self, symbol: str = "$", group_separator: str = ",",
                 decimal_separator: str = ".", code: str = ""):
        self.symbol = symbol
        self.group_separator = group_separator
        self.decimal_separator = decimal_separator
        self.code = code

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurrencyStyle':
        """Create CurrencyStyle instance from dictionary."""
        style = cls(
            symbol=data.get('symbol', '$'),
            group_separator=data.get('group_separator', ','),
            decimal_separator=data.get('decimal_separator', '.'),
            code=data.get('code', '')
        )
        errors = validate_separators(style.group_separator, style.decimal_separator)
        if errors:
            raise ValueError("Invalid currency style: " + "; ".join(errors))
        return style

    @classmethod
    def preset(cls, code: str) -> 'CurrencyStyle':
        """Get a copy of a preset style by currency code."""
        preset = CURRENCY_PRESETS.get(code.upper())
        if preset is None:
            raise ValueError(f"Unknown currency preset: {code}")
        return cls.from_dict(preset.to_dict())

    @classmethod
    def from_config(cls) -> 'CurrencyStyle':
        """Create the default style from configuration settings."""
        from .. import config

        preset = CURRENCY_PRESETS.get(config.CURRENCY_CODE.upper())
        data = preset.to_dict() if preset else {'code': config.CURRENCY_CODE.upper()}
        if config.CURRENCY_SYMBOL is not None:
            data['symbol'] = config.CURRENCY_SYMBOL
        if config.CURRENCY_GROUP_SEPARATOR is not None:
            data['group_separator'] = config.CURRENCY_GROUP_SEPARATOR
        if config.CURRENCY_DECIMAL_SEPARATOR is not None:
            data['decimal_separator'] = config.CURRENCY_DECIMAL_SEPARATOR
        return cls.from_dict(data)

    def unformat_pattern(self) -> Optional[re.Pattern]:
        """Pattern that undoes formatting in this style, None for the default."""
        if self.decimal_separator == '.':
            return None
        return build_unformat_pattern(self.decimal_separator)

    def to_dict(self) -> Dict[str, Any]:
        """Convert CurrencyStyle to dictionary."""
        return {
            'symbol': self.symbol,
            'group_separator': self.group_separator,
            'decimal_separator': self.decimal_separator,
            'code': self.code
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyStyle):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"CurrencyStyle(symbol={self.symbol!r}, group_separator={self.group_separator!r}, "
                f"decimal_separator={self.decimal_separator!r}, code={self.code!r})")

# Named styles available through CurrencyStyle.preset()
CURRENCY_PRESETS = {
    'USD': CurrencyStyle('$', ',', '.', 'USD'),
    'EUR': CurrencyStyle('\u20ac ', '.', ',', 'EUR'),  # €
    'GBP': CurrencyStyle('\u00a3', ',', '.', 'GBP'),  # £
    'INR': CurrencyStyle('\u20b9', ',', '.', 'INR'),  # ₹
    'JPY': CurrencyStyle('\u00a5', ',', '.', 'JPY'),  # ¥
    'IDR': CurrencyStyle('Rp ', '.', ',', 'IDR'),
}
