"""
Тесты обработчика Numeral Base Converter

Проверяет:
1. Конверсию во все четыре системы
2. Пустой ввод очищает поля без ошибки
3. Stale-on-error: литеральный текст в редактируемом поле, прочие поля без изменений
4. Обработчик не бросает исключений на невалидном вводе
"""

import pytest

from src.core.domain.errors import InvalidDigitError, OutOfRangeError
from src.core.domain.numeral import Base
from src.tools.base_converter import (
    EMPTY_RESULT,
    BaseConversionResult,
    BaseConverter,
    BaseConverterConfig,
    apply_digits_change,
    base_convert,
)


class TestBaseConvert:
    """Тесты base_convert"""

    def test_binary_1010(self):
        result = base_convert("1010", Base.BIN)
        assert result == BaseConversionResult(bin="1010", oct="12", dec="10", hex="A")
        assert result.error is None

    def test_hex_source(self):
        result = base_convert("ff", "hex")
        assert (result.bin, result.oct, result.dec, result.hex) == ("11111111", "377", "255", "FF")

    def test_decimal_leading_zeros_dropped(self):
        assert base_convert("0042", Base.DEC).dec == "42"

    def test_empty_input(self):
        assert base_convert("", Base.DEC) == EMPTY_RESULT

    def test_invalid_hex_digit(self):
        with pytest.raises(InvalidDigitError, match="Invalid hex digit"):
            base_convert("G", Base.HEX)

    def test_large_value_exact(self):
        """2^64 конвертируется без потери точности"""
        result = base_convert(str(2**64), Base.DEC)
        assert result.hex == "10000000000000000"
        assert result.bin == "1" + "0" * 64

    def test_length_limit_from_config(self):
        config = BaseConverterConfig(max_input_digits=3)
        with pytest.raises(OutOfRangeError):
            base_convert("1234", Base.DEC, config)


class TestStaleOnError:
    """Тесты apply_digits_change"""

    def test_error_keeps_other_fields(self):
        previous = base_convert("10", Base.DEC)
        result = apply_digits_change(previous, "1G", Base.HEX)

        assert result.error == "Invalid hex digit"
        assert result.hex == "1G"
        assert (result.bin, result.oct, result.dec) == (previous.bin, previous.oct, previous.dec)

    def test_recovery_after_error(self):
        broken = apply_digits_change(EMPTY_RESULT, "12", Base.BIN)
        assert broken.error == "Invalid binary digit"
        assert broken.bin == "12"

        fixed = apply_digits_change(broken, "11", Base.BIN)
        assert fixed.error is None
        assert fixed.dec == "3"

    def test_empty_clears_error(self):
        broken = apply_digits_change(EMPTY_RESULT, "x", Base.DEC)
        assert apply_digits_change(broken, "", Base.DEC) == EMPTY_RESULT

    def test_out_of_range_reported_as_error(self):
        config = BaseConverterConfig(max_input_digits=2)
        result = apply_digits_change(EMPTY_RESULT, "777", Base.OCT, config)
        assert result.error is not None
        assert "limit 2" in result.error
        assert result.oct == "777"


class TestBaseConverterHandler:
    """Тесты BaseConverter"""

    def test_sequence_of_edits(self):
        converter = BaseConverter()
        converter.on_digits_changed("255", Base.DEC)
        result = converter.on_digits_changed("25z", Base.DEC)

        assert result.error == "Invalid decimal digit"
        assert result.dec == "25z"
        assert result.hex == "FF"
        assert converter.state is result

    def test_reset(self):
        converter = BaseConverter()
        converter.on_digits_changed("7", Base.OCT)
        converter.reset()
        assert converter.state == EMPTY_RESULT

    def test_payload_includes_error_only_when_present(self):
        ok = base_convert("1", Base.BIN).to_payload()
        assert "error" not in ok
        broken = apply_digits_change(EMPTY_RESULT, "2", Base.BIN).to_payload()
        assert broken["error"] == "Invalid binary digit"

    def test_value_for(self):
        result = base_convert("10", Base.DEC)
        assert result.value_for(Base.HEX) == "A"
        assert result.value_for("bin") == "1010"
