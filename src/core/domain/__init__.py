"""
Domain models and value objects.

Contains numeral values, unit quantities and conversion tables, sample sets
and statistics snapshots, plus the error taxonomy of tool input.
"""

from src.core.domain.errors import (
    DivisionUndefinedError,
    InvalidDigitError,
    OutOfRangeError,
    ToolInputError,
    UnknownToolError,
    UnknownUnitError,
    UnparseableNumberError,
)
from src.core.domain.numeral import (
    Base,
    NumeralValue,
    parse_digits,
    render_all,
    render_int,
    validate_digits,
)
from src.core.domain.statistics import (
    Delimiter,
    SampleSet,
    StatisticsResult,
    compute_statistics,
    describe,
    parse_sample,
)
from src.core.domain.units import (
    CATEGORY_NAMES,
    CATEGORY_UNITS,
    CONVERSION_TABLES,
    ConversionTable,
    UnitCategory,
    UnitQuantity,
    convert,
    convert_temperature,
    units_for,
)

__all__ = [
    # Errors
    "ToolInputError",
    "InvalidDigitError",
    "OutOfRangeError",
    "UnknownUnitError",
    "UnparseableNumberError",
    "DivisionUndefinedError",
    "UnknownToolError",
    # Numeral
    "Base",
    "NumeralValue",
    "parse_digits",
    "render_int",
    "render_all",
    "validate_digits",
    # Units
    "CATEGORY_NAMES",
    "CATEGORY_UNITS",
    "CONVERSION_TABLES",
    "ConversionTable",
    "UnitCategory",
    "UnitQuantity",
    "convert",
    "convert_temperature",
    "units_for",
    # Statistics
    "Delimiter",
    "SampleSet",
    "StatisticsResult",
    "compute_statistics",
    "describe",
    "parse_sample",
]
