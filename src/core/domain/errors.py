"""
Исключения доменного слоя инструментов.

Все ошибки ввода — локальные и восстанавливаемые: обработчики инструментов
перехватывают их в точке вычисления и превращают в явные значения результата
(сообщение об ошибке, None, "No mode"). Наружу они не пропагируют.
"""


class ToolInputError(ValueError):
    """Базовая ошибка пользовательского ввода инструмента."""


class InvalidDigitError(ToolInputError):
    """
    Символ вне алфавита системы счисления.

    Сообщение называет систему: "Invalid binary digit", "Invalid hex digit", ...
    """

    def __init__(self, base_label: str, text: str = ""):
        self.base_label = base_label
        self.text = text
        super().__init__(f"Invalid {base_label} digit")


class OutOfRangeError(ToolInputError):
    """Ввод превышает настроенный лимит длины числа."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Input too long: {length} digits (limit {limit})")


class UnknownUnitError(ToolInputError):
    """Единица измерения не принадлежит выбранной категории."""

    def __init__(self, unit: str, category: str):
        self.unit = unit
        self.category = category
        super().__init__(f"Unknown unit {unit!r} for category {category!r}")


class UnparseableNumberError(ToolInputError):
    """
    Токен выборки не читается как число.

    Не является жёсткой ошибкой: токен молча исключается из выборки.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Cannot parse number from token {token!r}")


class DivisionUndefinedError(ArithmeticError):
    """
    Выборочная дисперсия не определена при N <= 1.

    Калькулятор статистик трактует этот случай как 0.
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Sample variance undefined for count={count} (need >= 2)")


class UnknownToolError(LookupError):
    """Идентификатор инструмента отсутствует в каталоге."""

    def __init__(self, tool_id: str):
        self.tool_id = tool_id
        super().__init__(f"Unknown tool id: {tool_id!r}")
