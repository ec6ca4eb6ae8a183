"""Tools — обработчики инструментов категории Data.

Каждый обработчик — чистая функция текущего ввода, пересчитываемая на каждое
изменение. Ошибки ввода локальны и возвращаются как значения результата.
"""

from .base_converter import (
    BaseConversionResult,
    BaseConverter,
    BaseConverterConfig,
    apply_digits_change,
    base_convert,
)
from .statistical_calculator import StatisticalCalculator, StatisticsConfig
from .unit_converter import (
    CategorySelection,
    UnitConversionResult,
    UnitConverter,
    UnitConverterConfig,
    parse_quantity_text,
    select_category,
)

__all__ = [
    # Base converter
    "BaseConversionResult",
    "BaseConverter",
    "BaseConverterConfig",
    "apply_digits_change",
    "base_convert",
    # Unit converter
    "CategorySelection",
    "UnitConversionResult",
    "UnitConverter",
    "UnitConverterConfig",
    "parse_quantity_text",
    "select_category",
    # Statistics
    "StatisticalCalculator",
    "StatisticsConfig",
]
