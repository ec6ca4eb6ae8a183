"""
Core math modules

Численные примитивы с гарантией стабильности и форматирование для отображения.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    parse_leading_float,
    sanitize_float,
    validate_positive,
)

# Display
from src.core.math.display import (
    NO_MODE_LABEL,
    STATS_DISPLAY_FRACTION_DIGITS,
    UNIT_DISPLAY_FRACTION_DIGITS,
    format_mode,
    format_number,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Parsing & sanitization
    "parse_leading_float",
    "is_valid_float",
    "sanitize_float",
    # Numerical Safeguards — Comparisons & validation
    "is_close",
    "validate_positive",
    # Display
    "NO_MODE_LABEL",
    "STATS_DISPLAY_FRACTION_DIGITS",
    "UNIT_DISPLAY_FRACTION_DIGITS",
    "format_mode",
    "format_number",
]
