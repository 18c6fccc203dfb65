"""
Configuration settings for currency_format.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# ========================================
# CURRENCY STYLE CONFIGURATION
# ========================================
CURRENCY_CODE = os.getenv('CURRENCY_CODE', 'USD')
CURRENCY_SYMBOL = os.getenv('CURRENCY_SYMBOL')
CURRENCY_GROUP_SEPARATOR = os.getenv('CURRENCY_GROUP_SEPARATOR')
CURRENCY_DECIMAL_SEPARATOR = os.getenv('CURRENCY_DECIMAL_SEPARATOR')

# ========================================
# APPLICATION CONFIGURATION
# ========================================
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

# ========================================
# VALIDATION
# ========================================
def validate_config():
    """Validate currency style settings."""
    from .core.models import CURRENCY_PRESETS
    from .utils.validators import validate_separators

    errors = []
    preset = CURRENCY_PRESETS.get(CURRENCY_CODE.upper())

    # Without a known preset every style field has to be given explicitly
    if preset is None:
        missing = [
            name for name, value in (
                ('CURRENCY_SYMBOL', CURRENCY_SYMBOL),
                ('CURRENCY_GROUP_SEPARATOR', CURRENCY_GROUP_SEPARATOR),
                ('CURRENCY_DECIMAL_SEPARATOR', CURRENCY_DECIMAL_SEPARATOR),
            ) if value is None
        ]
        if missing:
            errors.append(
                f"Unknown CURRENCY_CODE '{CURRENCY_CODE}'. Use a preset or set {', '.join(missing)}"
            )

    if not errors:
        group = CURRENCY_GROUP_SEPARATOR if CURRENCY_GROUP_SEPARATOR is not None else preset.group_separator
        decimal = CURRENCY_DECIMAL_SEPARATOR if CURRENCY_DECIMAL_SEPARATOR is not None else preset.decimal_separator
        errors.extend(validate_separators(group, decimal))

    if LOG_LEVEL.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        errors.append(f"LOG_LEVEL '{LOG_LEVEL}' is not a valid logging level")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"- {error}" for error in errors))

    return True

# Validate configuration on import
validate_config()
