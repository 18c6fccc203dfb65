"""
currency_format - currency display string formatting and unformatting.
"""

from .utils import *
from .core import *
from .services import *

__all__ = [
    'currency_format', 'currency_unformat',
    'CurrencyStyle', 'CURRENCY_PRESETS',
    'CurrencyFormatter', 'get_formatter'
]
