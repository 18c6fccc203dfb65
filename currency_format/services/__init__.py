"""
Services package for formatting in a bound currency style.
"""

from .currency_service import *

__all__ = ['CurrencyFormatter', 'get_formatter']
