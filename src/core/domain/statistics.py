"""
Statistics — описательная статистика выборки

Модели SampleSet / StatisticsResult и чистые функции:
- разбор выборки из свободного текста по разделителю
- агрегаты: count, sum, mean, median, mode, min, max, range
- дисперсия и стандартное отклонение (генеральное и выборочное)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка → None ("нет данных"), а не нули
2. Нечисловые токены молча отбрасываются
3. Мода сообщается только при частоте >= 2, иначе None ("нет моды")
4. Выборочное СКО при N <= 1 равно 0 (без деления на ноль)
5. Суммы считаются через math.fsum (компенсированное суммирование)
6. Переполнение float даёт inf в полях результата, а не исключение
"""

import math
import re
from collections import Counter
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.errors import DivisionUndefinedError, UnparseableNumberError
from src.core.math.numerical_safeguards import is_valid_float, parse_leading_float

# Минимальная частота значения, чтобы считаться модой
MODE_MIN_FREQUENCY: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class Delimiter(str, Enum):
    """Разделитель значений во входном тексте"""

    COMMA = ","
    SPACE = " "
    NEWLINE = "\n"
    SEMICOLON = ";"

    @property
    def pattern(self) -> re.Pattern[str]:
        """
        Регулярное выражение разбиения.

        Newline — отдельный литеральный разделитель (\\r?\\n); остальные
        используются как класс символов вместе с любыми пробелами.
        """
        if self is Delimiter.NEWLINE:
            return _NEWLINE_RE
        return re.compile(f"[{re.escape(self.value)}\\s]+")


_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


# =============================================================================
# MODELS
# =============================================================================


class SampleSet(BaseModel):
    """
    Упорядоченная выборка конечных чисел.

    Immutable модель (frozen=True). Порядок — порядок появления во вводе.
    """

    values: tuple[float, ...] = Field(default=(), description="Значения выборки")

    model_config = {"frozen": True}

    @field_validator("values")
    @classmethod
    def validate_finite(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Проверка, что все значения конечные"""
        for value in v:
            if not is_valid_float(value):
                raise ValueError(f"sample values must be finite, got {value}")
        return v

    @property
    def count(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return not self.values

    def sorted_values(self) -> list[float]:
        """Значения по возрастанию (stable sort)"""
        return sorted(self.values)


class StatisticsResult(BaseModel):
    """
    Снапшот описательной статистики (read-only).

    mode: кортеж значений с максимальной частотой (по возрастанию)
    или None, если максимальная частота меньше 2. Пустой кортеж не допускается.
    """

    count: int = Field(..., ge=1, description="Размер выборки N")
    sum: float = Field(..., description="Сумма значений")
    mean: float = Field(..., description="Среднее арифметическое")
    median: float = Field(..., description="Медиана")
    mode: tuple[float, ...] | None = Field(..., description="Мода или None (нет моды)")
    min: float = Field(..., description="Минимум")
    max: float = Field(..., description="Максимум")
    range: float = Field(..., ge=0, description="Размах max - min")
    variance: float = Field(..., ge=0, description="Генеральная дисперсия (делитель N)")
    std_dev_population: float = Field(..., ge=0, description="Генеральное СКО")
    std_dev_sample: float = Field(..., ge=0, description="Выборочное СКО (делитель N-1)")

    model_config = {"frozen": True}

    @field_validator("mode")
    @classmethod
    def validate_mode_not_empty(cls, v: tuple[float, ...] | None) -> tuple[float, ...] | None:
        """'Нет моды' выражается через None, а не пустой кортеж"""
        if v is not None and len(v) == 0:
            raise ValueError("mode must be None or non-empty")
        return v

    @property
    def has_mode(self) -> bool:
        return self.mode is not None


# =============================================================================
# РАЗБОР ВЫБОРКИ
# =============================================================================


def parse_token(token: str) -> float:
    """
    Разбор одного токена выборки.

    Raises:
        UnparseableNumberError: пустой токен, нет числового префикса или не-finite
    """
    stripped = token.strip()
    if not stripped:
        raise UnparseableNumberError(token)

    value = parse_leading_float(stripped)
    if value is None or not is_valid_float(value):
        raise UnparseableNumberError(token)
    return value


def parse_sample(raw_text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> SampleSet:
    """
    Извлечение выборки из свободного текста.

    Токены, которые не читаются как число, отбрасываются без ошибки.

    Args:
        raw_text: Исходный текст
        delimiter: Разделитель (",", " ", "\\n", ";")

    Returns:
        SampleSet (возможно пустой)
    """
    delimiter = Delimiter(delimiter)
    if not raw_text.strip():
        return SampleSet()

    values: list[float] = []
    for token in delimiter.pattern.split(raw_text):
        try:
            values.append(parse_token(token))
        except UnparseableNumberError:
            continue

    return SampleSet(values=tuple(values))


# =============================================================================
# АГРЕГАТЫ
# =============================================================================


def median_of_sorted(ordered: list[float]) -> float:
    """Медиана отсортированного непустого списка."""
    count = len(ordered)
    mid = count // 2
    if count % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def mode_of_sorted(ordered: list[float]) -> tuple[float, ...] | None:
    """
    Мода отсортированного списка.

    Returns:
        Значения с максимальной частотой по возрастанию, либо None,
        если максимальная частота < MODE_MIN_FREQUENCY
    """
    counts = Counter(ordered)
    if not counts:
        return None

    max_freq = max(counts.values())
    if max_freq < MODE_MIN_FREQUENCY:
        return None

    # Counter сохраняет порядок первого появления, т.е. возрастание
    return tuple(value for value, freq in counts.items() if freq == max_freq)


def overflow_safe_sum(values: list[float]) -> float:
    """
    Компенсированная сумма, устойчивая к переполнению.

    math.fsum бросает OverflowError, если частичная сумма выходит за пределы
    float; в этом случае сумма считается обычным сложением и даёт ±inf.
    """
    try:
        return math.fsum(values)
    except OverflowError:
        return sum(values)


def sum_squared_deviations(values: list[float], mean: float) -> float:
    """Σ (x - mean)²; квадрат через умножение переполняется в inf, а не в исключение."""
    deviations = [value - mean for value in values]
    return overflow_safe_sum([d * d for d in deviations])


def sample_variance(squared_deviations: float, count: int) -> float:
    """
    Выборочная (несмещённая) дисперсия, делитель N - 1.

    Args:
        squared_deviations: Σ (x - mean)²
        count: Размер выборки N

    Raises:
        DivisionUndefinedError: если N <= 1
    """
    if count <= 1:
        raise DivisionUndefinedError(count)
    return squared_deviations / (count - 1)


def describe(sample: SampleSet) -> StatisticsResult | None:
    """
    Описательная статистика выборки.

    Args:
        sample: Выборка

    Returns:
        StatisticsResult или None для пустой выборки
    """
    if sample.is_empty():
        return None

    ordered = sample.sorted_values()
    count = len(ordered)
    total = overflow_safe_sum(ordered)
    mean = total / count

    squared = sum_squared_deviations(ordered, mean)
    variance = squared / count

    try:
        std_dev_sample = math.sqrt(sample_variance(squared, count))
    except DivisionUndefinedError:
        std_dev_sample = 0.0

    return StatisticsResult(
        count=count,
        sum=total,
        mean=mean,
        median=median_of_sorted(ordered),
        mode=mode_of_sorted(ordered),
        min=ordered[0],
        max=ordered[-1],
        range=ordered[-1] - ordered[0],
        variance=variance,
        std_dev_population=math.sqrt(variance),
        std_dev_sample=std_dev_sample,
    )


def compute_statistics(
    raw_text: str,
    delimiter: Delimiter | str = Delimiter.COMMA,
) -> StatisticsResult | None:
    """
    Разбор текста и расчёт статистики за один шаг.

    Examples:
        >>> compute_statistics("1,2,3,4,5", ",").median
        3.0
        >>> compute_statistics("", ",") is None
        True
    """
    return describe(parse_sample(raw_text, delimiter))
