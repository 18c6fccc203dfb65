"""
Helper functions for preparing currency strings.
"""

import re
from decimal import Decimal
from typing import Optional


def build_unformat_pattern(decimal_separator: str = '.') -> re.Pattern:
    """Build a pattern that strips everything except digits and the decimal separator."""
    kept = ''.join(re.escape(char) for char in dict.fromkeys(decimal_separator))
    return re.compile(f"[^0-9{kept}]+")


def stringify_amount(amount: float, decimal_places: Optional[int] = None) -> str:
    """
    Convert an amount to the numeric string expected by currency_format.

    Always fixed-point, so ``1e16`` gives ``"10000000000000000"``. With
    ``decimal_places`` the amount is fixed to that many places first,
    e.g. ``stringify_amount(123456.789, 2)`` gives ``"123456.79"``.
    """
    if decimal_places is None:
        return format(Decimal(str(amount)), 'f')
    return f"{amount:.{decimal_places}f}"


def clean_amount_input(user_input: str) -> str:
    """Clean user-edited amount text."""
    return user_input.strip()
