"""
Тесты форматирования чисел для отображения

Проверяет:
1. Ограничение знаков после точки и отбрасывание хвостовых нулей
2. Группировку тысяч
3. Отображение моды и её отсутствия
"""

import math

import pytest

from src.core.math.display import NO_MODE_LABEL, format_mode, format_number


class TestFormatNumber:
    """Тесты format_number"""

    def test_integer_value_without_fraction(self):
        assert format_number(3.0, 4) == "3"

    def test_rounds_to_max_fraction_digits(self):
        assert format_number(1.41421356, 4) == "1.4142"
        assert format_number(1.58113883, 4) == "1.5811"

    def test_trailing_zeros_stripped(self):
        assert format_number(2.5, 6) == "2.5"

    def test_thousands_grouping(self):
        assert format_number(1234567.891, 2) == "1,234,567.89"

    def test_negative_zero_normalized(self):
        assert format_number(-0.00001, 4) == "0"

    def test_zero_fraction_digits(self):
        assert format_number(2.4, 0) == "2"

    def test_non_finite(self):
        assert format_number(math.inf, 4) == "∞"
        assert format_number(-math.inf, 4) == "-∞"
        assert format_number(math.nan, 4) == "NaN"

    def test_negative_digits_rejected(self):
        with pytest.raises(ValueError):
            format_number(1.0, -1)


class TestFormatMode:
    """Тесты format_mode"""

    def test_no_mode(self):
        assert format_mode(None, 4) == NO_MODE_LABEL == "No mode"

    def test_multiple_modes(self):
        assert format_mode((2.0, 5.5), 4) == "2, 5.5"
