"""Statistical Calculator — описательная статистика списка чисел

Обработчик инструмента "Statistical Calculator":
- Разбор выборки из текста по выбранному разделителю
- Пустая выборка → None (состояние "нет данных")
- Отображение: до 4 знаков после точки, мода как список или "No mode"

Переполнение float на экстремальных значениях (|x| ~ 1e308) даёт inf в полях
результата; отображается как "∞".
"""

import logging
from dataclasses import dataclass
from typing import Any

from src.core.domain.statistics import (
    Delimiter,
    StatisticsResult,
    describe,
    parse_sample,
)
from src.core.math.display import (
    STATS_DISPLAY_FRACTION_DIGITS,
    format_mode,
    format_number,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class StatisticsConfig:
    """Конфигурация калькулятора статистик."""

    # Разделитель при открытии инструмента
    default_delimiter: Delimiter = Delimiter.COMMA

    # Знаков после точки при отображении
    display_fraction_digits: int = STATS_DISPLAY_FRACTION_DIGITS


# Подписи карточек в порядке отображения: поле -> подпись
STAT_LABELS: dict[str, str] = {
    "count": "Count (N)",
    "sum": "Sum (Σ)",
    "mean": "Mean (Average)",
    "median": "Median",
    "mode": "Mode",
    "min": "Minimum",
    "max": "Maximum",
    "range": "Range",
    "std_dev_population": "Standard Deviation (σ)",
    "std_dev_sample": "Standard Deviation (Sample)",
    "variance": "Variance (σ²)",
}


# =============================================================================
# PAYLOAD
# =============================================================================


def statistics_payload(result: StatisticsResult) -> dict[str, Any]:
    """Сериализация результата для UI (mode=None → null)."""
    payload = result.model_dump()
    payload["mode"] = list(result.mode) if result.mode is not None else None
    return payload


def format_statistics(result: StatisticsResult, fraction_digits: int) -> dict[str, str]:
    """Отображаемые строки всех карточек."""
    display: dict[str, str] = {}
    for field in STAT_LABELS:
        if field == "mode":
            display[field] = format_mode(result.mode, fraction_digits)
        else:
            display[field] = format_number(getattr(result, field), fraction_digits)
    return display


# =============================================================================
# HANDLER
# =============================================================================


class StatisticalCalculator:
    """Обработчик инструмента калькулятора статистик."""

    tool_id = "statistical-calc"

    def __init__(self, config: StatisticsConfig | None = None):
        self.config = config or StatisticsConfig()
        self.delimiter = self.config.default_delimiter
        self.text = ""
        self.result: StatisticsResult | None = None

    def on_sample_text_changed(
        self,
        text: str,
        delimiter: Delimiter | str | None = None,
    ) -> StatisticsResult | None:
        """Пересчёт статистики при изменении текста или разделителя."""
        if delimiter is not None:
            self.delimiter = Delimiter(delimiter)
        self.text = text

        sample = parse_sample(text, self.delimiter)
        self.result = describe(sample)
        logger.debug("Recomputed statistics for %d values", sample.count)
        return self.result

    def on_delimiter_changed(self, delimiter: Delimiter | str) -> StatisticsResult | None:
        return self.on_sample_text_changed(self.text, delimiter)

    def display(self) -> dict[str, str] | None:
        """Отображаемые значения текущего результата (None — нет данных)."""
        if self.result is None:
            return None
        return format_statistics(self.result, self.config.display_fraction_digits)
