"""
Numerical Safeguards — безопасные численные примитивы

Модуль обеспечивает численную устойчивость вычислений инструментов:
- Разбор чисел из пользовательского текста (семантика parseFloat: ведущий префикс)
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в результаты (заменяются на fallback)
2. Все операции детерминированы и воспроизводимы
"""

import math
import re
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Ведущий числовой префикс токена: знак, мантисса, экспонента.
# Только ASCII-цифры: float() принимает и цифры других письменностей.
# "Infinity" распознаётся, но отбрасывается как не-finite.
_LEADING_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


# =============================================================================
# РАЗБОР ЧИСЕЛ
# =============================================================================


def parse_leading_float(text: str) -> float | None:
    """
    Разбор числа по ведущему префиксу строки.

    Повторяет поведение браузерного parseFloat: ведущие пробелы пропускаются,
    читается максимальный числовой префикс, хвост игнорируется.

    Args:
        text: Исходный токен

    Returns:
        Значение float или None, если числового префикса нет

    Examples:
        >>> parse_leading_float("3.5")
        3.5
        >>> parse_leading_float("  12px")
        12.0
        >>> parse_leading_float("1e3")
        1000.0
        >>> parse_leading_float("abc") is None
        True
    """
    match = _LEADING_FLOAT_RE.match(text.lstrip())
    if match is None:
        return None

    literal = match.group(0)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf

    return float(literal)


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
