"""
Numeral — позиционные системы счисления

Immutable Pydantic модель NumeralValue и чистые функции разбора/рендера
для систем bin / oct / dec / hex.

Точность: значения хранятся как Python int (произвольная точность), поэтому
числа больше 2^53 конвертируются без потерь.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.errors import InvalidDigitError, OutOfRangeError


# =============================================================================
# ENUMS
# =============================================================================


class Base(str, Enum):
    """Система счисления"""

    BIN = "bin"
    OCT = "oct"
    DEC = "dec"
    HEX = "hex"

    @property
    def radix(self) -> int:
        return _RADIX[self]

    @property
    def label(self) -> str:
        """Название для сообщений об ошибках"""
        return _LABEL[self]

    @property
    def alphabet(self) -> frozenset[str]:
        return _ALPHABET[self]


_RADIX: Final[dict[Base, int]] = {
    Base.BIN: 2,
    Base.OCT: 8,
    Base.DEC: 10,
    Base.HEX: 16,
}

_LABEL: Final[dict[Base, str]] = {
    Base.BIN: "binary",
    Base.OCT: "octal",
    Base.DEC: "decimal",
    Base.HEX: "hex",
}

_ALPHABET: Final[dict[Base, frozenset[str]]] = {
    Base.BIN: frozenset("01"),
    Base.OCT: frozenset("01234567"),
    Base.DEC: frozenset("0123456789"),
    Base.HEX: frozenset("0123456789abcdefABCDEF"),
}

# Цифры для рендера; hex выводится в верхнем регистре
_DIGITS: Final[str] = "0123456789ABCDEF"


# =============================================================================
# РАЗБОР И РЕНДЕР
# =============================================================================


def validate_digits(text: str, base: Base) -> None:
    """
    Проверка алфавита: каждый символ должен принадлежать системе base.

    Raises:
        InvalidDigitError: при первом же постороннем символе
    """
    alphabet = base.alphabet
    for char in text:
        if char not in alphabet:
            raise InvalidDigitError(base.label, text)


def parse_digits(text: str, base: Base, max_digits: int | None = None) -> int:
    """
    Разбор строки цифр в целое: value = Σ digit_i × base^(n-1-i).

    Сумма накапливается по схеме Горнера (value = value * radix + digit),
    что эквивалентно позиционной сумме.

    Args:
        text: Непустая строка цифр
        base: Система счисления строки
        max_digits: Лимит длины ввода (None = без лимита)

    Returns:
        Неотрицательное целое произвольной точности

    Raises:
        InvalidDigitError: символ вне алфавита (проверяется первым)
        OutOfRangeError: длина больше max_digits
    """
    validate_digits(text, base)

    if max_digits is not None and len(text) > max_digits:
        raise OutOfRangeError(len(text), max_digits)

    radix = base.radix
    value = 0
    for char in text:
        value = value * radix + int(char, 16)
    return value


def render_int(value: int, base: Base) -> str:
    """
    Рендер неотрицательного целого в систему base делением с остатком.

    Десятичный вывод без ведущих нулей, hex в верхнем регистре, 0 → "0".

    Examples:
        >>> render_int(10, Base.BIN)
        '1010'
        >>> render_int(255, Base.HEX)
        'FF'
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0"

    radix = base.radix
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, radix)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def render_all(value: int) -> dict[Base, str]:
    """Рендер значения во всех четырёх системах."""
    return {base: render_int(value, base) for base in Base}


# =============================================================================
# NUMERAL VALUE MODEL
# =============================================================================


class NumeralValue(BaseModel):
    """
    Число, введённое в конкретной системе счисления.

    Immutable модель (frozen=True). Инвариант: digits содержит только
    символы алфавита base.
    """

    base: Base = Field(..., description="Система счисления ввода")
    digits: str = Field(..., min_length=1, description="Строка цифр")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_alphabet(cls, v: str, info) -> str:
        """Проверка, что все символы принадлежат алфавиту base"""
        if "base" in info.data:
            validate_digits(v, info.data["base"])
        return v

    def to_int(self) -> int:
        """Целое значение (произвольная точность)"""
        return parse_digits(self.digits, self.base)

    def render(self, base: Base) -> str:
        """Представление того же значения в другой системе"""
        return render_int(self.to_int(), base)
