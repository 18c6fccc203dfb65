"""
Utilities package for formatting, validation and helper functions.
"""

from .helpers import *
from .formatters import *
from .validators import *

__all__ = ['currency_format', 'currency_unformat', 'build_unformat_pattern', 'stringify_amount', 'clean_amount_input',
           'is_numeric_string', 'validate_separators', 'validate_pattern']
