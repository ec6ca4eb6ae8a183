"""Numeral Base Converter — bin / oct / dec / hex

Обработчик инструмента "Binary/Hexadecimal Converter":
- Валидация алфавита системы ввода (InvalidDigitError с названием системы)
- Разбор в int произвольной точности и рендер во все четыре системы
- Пустой ввод очищает все поля без ошибки
- Stale-on-error: редактируемое поле сохраняет литеральный (невалидный) текст,
  остальные три поля остаются на последних валидных значениях

Обработчик никогда не бросает исключений наружу: ошибка ввода возвращается
в поле error результата.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any

from src.core.domain.errors import ToolInputError
from src.core.domain.numeral import Base, parse_digits, render_all

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class BaseConversionResult:
    """Состояние четырёх полей конвертера."""

    bin: str = ""
    oct: str = ""
    dec: str = ""
    hex: str = ""

    # Сообщение об ошибке ввода (None — ввод валиден)
    error: str | None = None

    def value_for(self, base: Base) -> str:
        return getattr(self, Base(base).value)

    def with_value(self, base: Base, text: str) -> "BaseConversionResult":
        return replace(self, **{Base(base).value: text})

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "bin": self.bin,
            "oct": self.oct,
            "dec": self.dec,
            "hex": self.hex,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


EMPTY_RESULT = BaseConversionResult()


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BaseConverterConfig:
    """Конфигурация конвертера систем счисления.

    Значения хранятся как int произвольной точности, поэтому лимит длины
    по умолчанию не задан.
    """

    # Максимальная длина ввода в цифрах (None = без лимита)
    max_input_digits: int | None = None


# =============================================================================
# CONVERSION
# =============================================================================


def base_convert(
    text: str,
    source_base: Base,
    config: BaseConverterConfig | None = None,
) -> BaseConversionResult:
    """Конверсия строки цифр во все четыре системы.

    Args:
        text: Ввод пользователя
        source_base: Система, в которой введён текст
        config: Конфигурация (лимит длины)

    Returns:
        BaseConversionResult без ошибки

    Raises:
        InvalidDigitError: символ вне алфавита source_base
        OutOfRangeError: превышен max_input_digits
    """
    config = config or BaseConverterConfig()
    source_base = Base(source_base)

    if not text:
        return EMPTY_RESULT

    value = parse_digits(text, source_base, max_digits=config.max_input_digits)
    rendered = render_all(value)
    return BaseConversionResult(
        bin=rendered[Base.BIN],
        oct=rendered[Base.OCT],
        dec=rendered[Base.DEC],
        hex=rendered[Base.HEX],
    )


def apply_digits_change(
    previous: BaseConversionResult,
    text: str,
    source_base: Base,
    config: BaseConverterConfig | None = None,
) -> BaseConversionResult:
    """Новое состояние полей после правки одного из них.

    При ошибке ввода: поле source_base получает литеральный текст,
    остальные поля берутся из previous, error заполнен.
    """
    source_base = Base(source_base)
    try:
        return base_convert(text, source_base, config)
    except ToolInputError as e:
        logger.debug("Rejected %s input %r: %s", source_base.value, text, e)
        return replace(previous.with_value(source_base, text), error=str(e))


# =============================================================================
# HANDLER
# =============================================================================


class BaseConverter:
    """Обработчик инструмента конвертера систем счисления.

    Хранит текущее состояние четырёх полей на время активации инструмента.
    """

    tool_id = "base-converter"

    def __init__(self, config: BaseConverterConfig | None = None):
        self.config = config or BaseConverterConfig()
        self.state = EMPTY_RESULT

    def on_digits_changed(self, text: str, source_base: Base) -> BaseConversionResult:
        """Правка поля source_base; возвращает новое состояние всех полей."""
        self.state = apply_digits_change(self.state, text, source_base, self.config)
        return self.state

    def reset(self) -> None:
        self.state = EMPTY_RESULT
