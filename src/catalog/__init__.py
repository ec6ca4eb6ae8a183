"""Catalog — каталог инструментов, поиск и реестр обработчиков."""

from .registry import ToolRegistry, default_registry
from .tools import (
    SEARCH_RESULTS_LIMIT,
    TOOL_CATEGORIES,
    Tool,
    ToolCategory,
    all_tools,
    find_tool,
    search_tools,
)

__all__ = [
    "SEARCH_RESULTS_LIMIT",
    "TOOL_CATEGORIES",
    "Tool",
    "ToolCategory",
    "ToolRegistry",
    "all_tools",
    "default_registry",
    "find_tool",
    "search_tools",
]
