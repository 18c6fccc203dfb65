"""
Validation utilities for currency_format.
"""

import re
from typing import List


def is_numeric_string(value, decimal_separator: str = '.') -> bool:
    """Check value is a digit string with an optional fractional part."""
    if not isinstance(value, str):
        return False
    fraction = f"(?:{re.escape(decimal_separator)}[0-9]+)?" if decimal_separator else ''
    return re.fullmatch(f"-?[0-9]+{fraction}", value) is not None


def validate_separators(group_separator: str, decimal_separator: str) -> List[str]:
    """Validate a separator pair. Returns list of error strings."""
    errors = []

    if not isinstance(group_separator, str) or not isinstance(decimal_separator, str):
        errors.append("Separators must be strings")
        return errors

    if decimal_separator == '':
        errors.append("Decimal separator cannot be empty")
    elif decimal_separator == group_separator:
        errors.append(f"Group and decimal separator are both '{decimal_separator}'")

    if any(char.isdigit() for char in group_separator + decimal_separator):
        errors.append("Separators cannot contain digits")

    return errors


def validate_pattern(pattern) -> bool:
    """Validate an unformat pattern."""
    if pattern is None or callable(pattern) or isinstance(pattern, re.Pattern):
        return True
    if isinstance(pattern, str):
        try:
            re.compile(pattern)
        except re.error:
            return False
        return True
    return False
