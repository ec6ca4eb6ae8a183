"""
Display — форматирование чисел для UI

Презентационный слой отделён от вычислений: конверсии и статистика
возвращают полную точность float, округление выполняется только здесь.
"""

from typing import Final, Iterable

from src.core.math.numerical_safeguards import is_valid_float

# Точность отображения по умолчанию для результатов конверсии единиц
UNIT_DISPLAY_FRACTION_DIGITS: Final[int] = 6

# Точность отображения по умолчанию для статистик
STATS_DISPLAY_FRACTION_DIGITS: Final[int] = 4

NO_MODE_LABEL: Final[str] = "No mode"


def format_number(value: float, max_fraction_digits: int) -> str:
    """
    Форматирование числа: не более N знаков после точки, группировка тысяч.

    Хвостовые нули дробной части отбрасываются, "-0" нормализуется в "0".

    Args:
        value: Значение для отображения
        max_fraction_digits: Максимум знаков после десятичной точки

    Returns:
        Строковое представление

    Examples:
        >>> format_number(1234.5, 6)
        '1,234.5'
        >>> format_number(1.41421356, 4)
        '1.4142'
        >>> format_number(3.0, 4)
        '3'
    """
    if max_fraction_digits < 0:
        raise ValueError(f"max_fraction_digits must be >= 0, got {max_fraction_digits}")

    if not is_valid_float(value):
        if value != value:
            return "NaN"
        return "∞" if value > 0 else "-∞"

    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if text == "-0":
        return "0"
    return text


def format_mode(mode: Iterable[float] | None, max_fraction_digits: int) -> str:
    """Мода как список через запятую или метка отсутствия моды."""
    if mode is None:
        return NO_MODE_LABEL
    return ", ".join(format_number(v, max_fraction_digits) for v in mode)
