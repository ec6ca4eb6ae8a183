"""
Contract Validation Module

Валидация JSON контрактов данных, передаваемых слою UI.
"""

from .validators import (
    BaseConversionValidator,
    ContractValidator,
    SchemaLoader,
    StatisticsResultValidator,
    UnitConversionValidator,
    validate_base_conversion,
    validate_statistics_result,
    validate_unit_conversion,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BaseConversionValidator",
    "UnitConversionValidator",
    "StatisticsResultValidator",
    # Functions
    "validate_base_conversion",
    "validate_unit_conversion",
    "validate_statistics_result",
]
