"""Tool Registry — диспетчеризация инструментов по id.

Таблица "стабильный id → фабрика обработчика". Инструменты каталога без
зарегистрированного обработчика разрешаются в None (состояние "Coming soon"),
id вне каталога — UnknownToolError (маршрутизатор уводит на главную).
"""

import logging
from typing import Any, Callable

from src.catalog.tools import TOOL_CATEGORIES, Tool, ToolCategory, all_tools, find_tool
from src.core.domain.errors import UnknownToolError
from src.tools import BaseConverter, StatisticalCalculator, UnitConverter

logger = logging.getLogger(__name__)

HandlerFactory = Callable[[], Any]


class ToolRegistry:
    """Реестр обработчиков инструментов.

    Каждый вызов resolve создаёт новый обработчик: состояние инструмента
    локально для активации и отбрасывается при уходе со страницы.
    """

    def __init__(self, categories: tuple[ToolCategory, ...] = TOOL_CATEGORIES):
        self.categories = categories
        self._factories: dict[str, HandlerFactory] = {}

    def register(self, tool_id: str, factory: HandlerFactory) -> None:
        """Регистрация фабрики обработчика.

        Raises:
            UnknownToolError: если tool_id нет в каталоге
            ValueError: если для tool_id уже есть обработчик
        """
        if find_tool(tool_id, self.categories) is None:
            raise UnknownToolError(tool_id)
        if tool_id in self._factories:
            raise ValueError(f"Handler already registered for tool {tool_id!r}")

        self._factories[tool_id] = factory
        logger.debug("Registered handler for tool %s", tool_id)

    def lookup(self, tool_id: str) -> Tool:
        """Инструмент каталога по id.

        Raises:
            UnknownToolError: если tool_id нет в каталоге
        """
        tool = find_tool(tool_id, self.categories)
        if tool is None:
            raise UnknownToolError(tool_id)
        return tool

    def is_available(self, tool_id: str) -> bool:
        return tool_id in self._factories

    def resolve(self, tool_id: str) -> Any | None:
        """Новый обработчик инструмента или None ("Coming soon").

        Raises:
            UnknownToolError: если tool_id нет в каталоге
        """
        self.lookup(tool_id)
        factory = self._factories.get(tool_id)
        if factory is None:
            logger.info("Tool %s has no handler yet", tool_id)
            return None
        return factory()

    def available_tools(self) -> list[Tool]:
        """Инструменты с обработчиком, в порядке каталога."""
        return [tool for tool in all_tools(self.categories) if tool.id in self._factories]


def default_registry() -> ToolRegistry:
    """Реестр с обработчиками инструментов категории Data."""
    registry = ToolRegistry()
    registry.register(BaseConverter.tool_id, BaseConverter)
    registry.register(UnitConverter.tool_id, UnitConverter)
    registry.register(StatisticalCalculator.tool_id, StatisticalCalculator)
    return registry
