"""
Formatting utilities for currency display strings.
"""

import re
from typing import Callable, Optional, Union

# Everything that is not an ASCII digit or a literal period
DEFAULT_UNFORMAT_PATTERN = re.compile(r'[^0-9.]+')

UnformatPattern = Union[str, re.Pattern, Callable[[str], bool]]


def currency_format(value: str, symbol: str, group_separator: str, decimal_separator: str) -> str:
    """
    Format a numeric string as currency.

    Expected to be called on a float that has already been converted to a
    string. Decimals are never added or removed, so currencies such as JPY
    can be shown without a fractional part; round the float first (e.g. with
    ``stringify_amount(amount, 2)``) when cents should always be shown.

    Args:
        value (str): Numeric string, e.g. ``"123456.78"``
        symbol (str): Currency symbol prefix, e.g. ``"$ "``
        group_separator (str): Thousands separator. An empty string disables grouping.
        decimal_separator (str): Marker used in ``value`` for the start of the
            fractional part. Only used to find the split, never replaced.

    Returns:
        str: Formatted currency string, e.g. ``"$ 123,456.78"``
    """
    if group_separator == '':
        return symbol + value

    decimal_position = value.rfind(decimal_separator)
    if decimal_position > -1:
        decimals = value[decimal_position:]
        digits = value[:decimal_position]
    else:
        decimals = ''
        digits = value

    units = ''
    digits_length = len(digits)
    for i in range(digits_length):
        # Walk from the rightmost character, adding each one to the left
        units = digits[digits_length - 1 - i] + units
        if (i + 1) % 3 == 0 and i < digits_length - 1:
            units = group_separator + units

    return symbol + units + decimals


def currency_unformat(value: str, pattern: Optional[UnformatPattern] = None) -> str:
    """
    Strip currency decoration from a display string.

    The result is usually passed to ``float()``. Digits that are not part of
    the amount (e.g. "Total for 2024: $ 12.00") are kept as well, so remove
    them first or pass a more specific pattern.

    Args:
        value (str): Display string, e.g. ``"Total: $ 12,345,678.90 (annual)"``
        pattern: What to strip. A regex string, a compiled pattern, or a
            predicate returning True for each character to drop. Defaults to
            anything that is not a digit or a period.

    Returns:
        str: Remaining characters, e.g. ``"12345678.90"``
    """
    if pattern is None:
        pattern = DEFAULT_UNFORMAT_PATTERN
    elif isinstance(pattern, str):
        pattern = re.compile(pattern)
    elif not isinstance(pattern, re.Pattern):
        return ''.join(char for char in value if not pattern(char))

    return pattern.sub('', value)
