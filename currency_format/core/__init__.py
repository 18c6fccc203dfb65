"""
Core package for currency style models.
"""

from .models import *

__all__ = ['CurrencyStyle', 'CURRENCY_PRESETS']
