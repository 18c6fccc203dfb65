"""
Pytest configuration and fixtures for currency_format tests.
"""

import importlib
import os
import sys
import pytest
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from currency_format import config
from currency_format.core.models import CurrencyStyle
from currency_format.services import currency_service

@pytest.fixture(scope="session", autouse=True)
def test_env():
    """Set up test environment variables."""
    os.environ.setdefault('CURRENCY_CODE', 'USD')
    os.environ.setdefault('LOG_LEVEL', 'DEBUG')

    yield

@pytest.fixture
def reload_config(monkeypatch):
    """Reload configuration after patching the environment, restoring it afterwards."""
    for name in ('CURRENCY_CODE', 'CURRENCY_SYMBOL', 'CURRENCY_GROUP_SEPARATOR',
                 'CURRENCY_DECIMAL_SEPARATOR', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)

@pytest.fixture
def fresh_default_formatter(monkeypatch):
    """Drop the cached default formatter."""
    monkeypatch.setattr(currency_service, '_default_formatter', None)

@pytest.fixture
def usd_style():
    """US dollar style."""
    return CurrencyStyle.preset('USD')

@pytest.fixture
def eur_style():
    """Euro style with period grouping and comma decimals."""
    return CurrencyStyle.preset('EUR')
