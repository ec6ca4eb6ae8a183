"""
Units — конверсия единиц измерения по категориям

Единственный допустимый способ преобразований между единицами
одной категории (длина, масса, температура, объём данных).

Две схемы конверсии:
- Линейная (length, weight, data): rate = "единиц на одну каноническую единицу",
  canonical = value / r_from, result = canonical * r_to.
  Канонические единицы: метр, килограмм, байт (rate = 1).
- Аффинная (temperature): нормализация в Цельсий и обратно.

Округление не выполняется: форматирование — задача слоя отображения.
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.domain.errors import UnknownUnitError
from src.core.math.numerical_safeguards import validate_positive


# =============================================================================
# ENUMS
# =============================================================================


class UnitCategory(str, Enum):
    """Категория единиц измерения"""

    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    DATA = "data"


# =============================================================================
# CONVERSION TABLE
# =============================================================================


class ConversionTable(BaseModel):
    """
    Таблица линейных коэффициентов категории.

    Immutable модель (frozen=True). Инварианты:
    - rate базовой единицы равен ровно 1
    - все rates конечные и положительные
    """

    category: UnitCategory = Field(..., description="Категория таблицы")
    base_unit: str = Field(..., min_length=1, description="Каноническая единица")
    rates: Mapping[str, float] = Field(..., description="Единиц на одну каноническую")

    model_config = {"frozen": True}

    @field_validator("rates")
    @classmethod
    def validate_rates(cls, v: Mapping[str, float], info) -> Mapping[str, float]:
        """Проверка rates: положительные, базовая единица с rate = 1"""
        for unit, rate in v.items():
            validate_positive(rate, f"rate[{unit}]")

        base_unit = info.data.get("base_unit")
        if base_unit is not None:
            if base_unit not in v:
                raise ValueError(f"base unit {base_unit!r} missing from rates")
            if v[base_unit] != 1:
                raise ValueError(f"base unit {base_unit!r} must have rate 1, got {v[base_unit]}")
        return MappingProxyType(dict(v))

    def rate(self, unit: str) -> float:
        """Коэффициент единицы; UnknownUnitError для чужой единицы"""
        try:
            return self.rates[unit]
        except KeyError:
            raise UnknownUnitError(unit, self.category.value) from None


# =============================================================================
# КАТАЛОГ ЕДИНИЦ
# =============================================================================

# Отображаемые имена категорий
CATEGORY_NAMES: Final[Mapping[UnitCategory, str]] = MappingProxyType({
    UnitCategory.LENGTH: "Length",
    UnitCategory.WEIGHT: "Weight",
    UnitCategory.TEMPERATURE: "Temperature",
    UnitCategory.DATA: "Digital Storage",
})

# Единицы категорий в порядке отображения: symbol -> label
CATEGORY_UNITS: Final[Mapping[UnitCategory, Mapping[str, str]]] = MappingProxyType({
    UnitCategory.LENGTH: MappingProxyType({
        "m": "Meter",
        "km": "Kilometer",
        "cm": "Centimeter",
        "mm": "Millimeter",
        "ft": "Feet",
        "in": "Inch",
        "yd": "Yard",
        "mi": "Mile",
    }),
    UnitCategory.WEIGHT: MappingProxyType({
        "kg": "Kilogram",
        "g": "Gram",
        "mg": "Milligram",
        "lb": "Pound",
        "oz": "Ounce",
        "st": "Stone",
    }),
    UnitCategory.TEMPERATURE: MappingProxyType({
        "c": "Celsius",
        "f": "Fahrenheit",
        "k": "Kelvin",
    }),
    UnitCategory.DATA: MappingProxyType({
        "b": "Byte",
        "kb": "Kilobyte",
        "mb": "Megabyte",
        "gb": "Gigabyte",
        "tb": "Terabyte",
        "pb": "Petabyte",
    }),
})

# Двоичные кратности (1 kb = 1024 b)
_KIB: Final[int] = 1024

CONVERSION_TABLES: Final[Mapping[UnitCategory, ConversionTable]] = MappingProxyType({
    UnitCategory.LENGTH: ConversionTable(
        category=UnitCategory.LENGTH,
        base_unit="m",
        rates={
            "m": 1,
            "km": 0.001,
            "cm": 100,
            "mm": 1000,
            "ft": 3.28084,
            "in": 39.3701,
            "yd": 1.09361,
            "mi": 0.000621371,
        },
    ),
    UnitCategory.WEIGHT: ConversionTable(
        category=UnitCategory.WEIGHT,
        base_unit="kg",
        rates={
            "kg": 1,
            "g": 1000,
            "mg": 1_000_000,
            "lb": 2.20462,
            "oz": 35.274,
            "st": 0.157473,
        },
    ),
    UnitCategory.DATA: ConversionTable(
        category=UnitCategory.DATA,
        base_unit="b",
        rates={
            "b": 1,
            "kb": 1 / _KIB,
            "mb": 1 / _KIB**2,
            "gb": 1 / _KIB**3,
            "tb": 1 / _KIB**4,
            "pb": 1 / _KIB**5,
        },
    ),
})

# Абсолютный ноль по Цельсию (сдвиг шкалы Кельвина)
KELVIN_OFFSET: Final[float] = 273.15


def units_for(category: UnitCategory) -> list[str]:
    """Символы единиц категории в порядке отображения."""
    return list(CATEGORY_UNITS[category])


def ensure_unit(unit: str, category: UnitCategory) -> None:
    """
    Проверка принадлежности единицы категории.

    Raises:
        UnknownUnitError: если unit не входит в набор категории
    """
    if unit not in CATEGORY_UNITS[category]:
        raise UnknownUnitError(unit, category.value)


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def _to_celsius(value: float, unit: str) -> float:
    if unit == "f":
        return (value - 32) * 5 / 9
    if unit == "k":
        return value - KELVIN_OFFSET
    return value


def _from_celsius(celsius: float, unit: str) -> float:
    if unit == "f":
        return celsius * 9 / 5 + 32
    if unit == "k":
        return celsius + KELVIN_OFFSET
    return celsius


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Конверсия температуры через Цельсий.

    Формулы:
        to C:   c = v | (v - 32) * 5/9 | v - 273.15
        from C: c | c * 9/5 + 32 | c + 273.15

    Examples:
        >>> convert_temperature(100.0, "c", "f")
        212.0
    """
    ensure_unit(from_unit, UnitCategory.TEMPERATURE)
    ensure_unit(to_unit, UnitCategory.TEMPERATURE)

    if from_unit == to_unit:
        return value

    return _from_celsius(_to_celsius(value, from_unit), to_unit)


def convert(value: float, from_unit: str, to_unit: str, category: UnitCategory) -> float:
    """
    Конверсия значения между единицами одной категории.

    Args:
        value: Исходное значение в from_unit
        from_unit: Символ исходной единицы
        to_unit: Символ целевой единицы
        category: Категория обеих единиц

    Returns:
        Значение в to_unit (полная точность float)

    Raises:
        UnknownUnitError: если единица не принадлежит категории
    """
    category = UnitCategory(category)

    if category is UnitCategory.TEMPERATURE:
        return convert_temperature(value, from_unit, to_unit)

    table = CONVERSION_TABLES[category]
    canonical = value / table.rate(from_unit)
    return canonical * table.rate(to_unit)


# =============================================================================
# UNIT QUANTITY MODEL
# =============================================================================


class UnitQuantity(BaseModel):
    """
    Величина с единицей измерения.

    Immutable модель (frozen=True). Инвариант: unit принадлежит category.
    """

    category: UnitCategory = Field(..., description="Категория единицы")
    unit: str = Field(..., min_length=1, description="Символ единицы")
    value: float = Field(..., description="Численное значение")

    model_config = {"frozen": True}

    @field_validator("unit")
    @classmethod
    def validate_unit_in_category(cls, v: str, info) -> str:
        """Проверка, что unit входит в набор единиц категории"""
        if "category" in info.data:
            ensure_unit(v, info.data["category"])
        return v

    @field_validator("value")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        """NaN запрещён; ±inf допустим как результат переполнения при пересчёте"""
        if math.isnan(v):
            raise ValueError("value must not be NaN")
        return v

    def to(self, unit: str) -> "UnitQuantity":
        """
        Та же величина в другой единице той же категории.

        Пересчёт очень больших значений (~1e308) в мелкие единицы даёт ±inf.
        """
        return UnitQuantity(
            category=self.category,
            unit=unit,
            value=convert(self.value, self.unit, unit, self.category),
        )
