"""Unit Converter — конверсия единиц по категориям

Обработчик инструмента "Unit Converter":
- Выбор категории сбрасывает единицы на первые две категории и значение на 1
- Конверсия через src.core.domain.units.convert (без округления)
- Форматирование результата для отображения (до 6 знаков) отдельно от конверсии
- Текст поля ввода, который не читается как число, трактуется как 0
"""

import logging
from dataclasses import dataclass
from typing import Any

from src.core.domain.units import (
    CATEGORY_NAMES,
    CATEGORY_UNITS,
    UnitCategory,
    convert,
    ensure_unit,
    units_for,
)
from src.core.math.display import UNIT_DISPLAY_FRACTION_DIGITS, format_number
from src.core.math.numerical_safeguards import parse_leading_float, sanitize_float

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class UnitConverterConfig:
    """Конфигурация конвертера единиц."""

    # Категория при открытии инструмента
    initial_category: UnitCategory = UnitCategory.LENGTH

    # Значение ввода после смены категории
    default_value: float = 1.0

    # Знаков после точки при отображении результата
    display_fraction_digits: int = UNIT_DISPLAY_FRACTION_DIGITS


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class CategorySelection:
    """Состояние селекторов после смены категории."""

    category: UnitCategory
    units: tuple[str, ...]
    default_from: str
    default_to: str
    default_value: float

    @property
    def unit_labels(self) -> dict[str, str]:
        return dict(CATEGORY_UNITS[self.category])


@dataclass(frozen=True)
class UnitConversionResult:
    """Результат конверсии с отображаемой строкой."""

    category: UnitCategory
    from_unit: str
    to_unit: str
    value: float
    result: float
    display: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "from_unit": self.from_unit,
            "to_unit": self.to_unit,
            "value": self.value,
            "result": self.result,
            "display": self.display,
        }


# =============================================================================
# HELPERS
# =============================================================================


def select_category(category: UnitCategory, default_value: float = 1.0) -> CategorySelection:
    """Единицы категории и значения селекторов по умолчанию.

    default_to — вторая единица категории, либо первая, если единица одна.
    """
    category = UnitCategory(category)
    units = units_for(category)
    return CategorySelection(
        category=category,
        units=tuple(units),
        default_from=units[0],
        default_to=units[1] if len(units) > 1 else units[0],
        default_value=default_value,
    )


def parse_quantity_text(text: str) -> float:
    """Значение поля ввода; нечисловой или не-finite текст читается как 0."""
    value = parse_leading_float(text)
    if value is None:
        return 0.0
    return sanitize_float(value, fallback=0.0)


# =============================================================================
# HANDLER
# =============================================================================


class UnitConverter:
    """Обработчик инструмента конвертера единиц.

    Хранит выбранную категорию, единицы и значение ввода.
    """

    tool_id = "unit-converter"

    def __init__(self, config: UnitConverterConfig | None = None):
        self.config = config or UnitConverterConfig()
        self.on_category_changed(self.config.initial_category)

    @staticmethod
    def categories() -> dict[str, str]:
        """Категории в порядке отображения: id -> название."""
        return {category.value: name for category, name in CATEGORY_NAMES.items()}

    def on_category_changed(self, category: UnitCategory) -> CategorySelection:
        """Смена категории: сброс единиц и значения."""
        selection = select_category(category, self.config.default_value)
        self.category = selection.category
        self.from_unit = selection.default_from
        self.to_unit = selection.default_to
        self.value = selection.default_value
        logger.debug(
            "Category %s selected (%s -> %s)",
            self.category.value,
            self.from_unit,
            self.to_unit,
        )
        return selection

    def on_value_changed(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        category: UnitCategory,
    ) -> float:
        """Конверсия при изменении значения или единиц.

        Raises:
            UnknownUnitError: если единица не принадлежит категории
        """
        category = UnitCategory(category)
        ensure_unit(from_unit, category)
        ensure_unit(to_unit, category)

        self.category = category
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.value = value
        return convert(value, from_unit, to_unit, category)

    def on_value_text_changed(self, text: str) -> UnitConversionResult:
        """Ввод текста в поле значения с текущими единицами."""
        self.value = parse_quantity_text(text)
        return self.current()

    def on_from_unit_changed(self, unit: str) -> UnitConversionResult:
        ensure_unit(unit, self.category)
        self.from_unit = unit
        return self.current()

    def on_to_unit_changed(self, unit: str) -> UnitConversionResult:
        ensure_unit(unit, self.category)
        self.to_unit = unit
        return self.current()

    def current(self) -> UnitConversionResult:
        """Результат конверсии для текущего состояния."""
        result = convert(self.value, self.from_unit, self.to_unit, self.category)
        return UnitConversionResult(
            category=self.category,
            from_unit=self.from_unit,
            to_unit=self.to_unit,
            value=self.value,
            result=result,
            display=format_number(result, self.config.display_fraction_digits),
        )
