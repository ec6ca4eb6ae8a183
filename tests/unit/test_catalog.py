"""
Тесты каталога инструментов и реестра обработчиков

Проверяет:
1. Полноту и уникальность каталога
2. Поиск по id и командную палитру (лимит 5, регистронезависимо)
3. Диспетчеризацию tool id → обработчик
"""

import pytest
from pydantic import ValidationError

from src.catalog import (
    SEARCH_RESULTS_LIMIT,
    TOOL_CATEGORIES,
    Tool,
    ToolCategory,
    ToolRegistry,
    all_tools,
    default_registry,
    find_tool,
    search_tools,
)
from src.core.domain.errors import UnknownToolError
from src.tools import BaseConverter, StatisticalCalculator, UnitConverter


class TestCatalog:
    """Тесты каталога"""

    def test_category_order(self):
        assert [c.id for c in TOOL_CATEGORIES] == [
            "text", "code", "image", "productivity", "data", "networking", "security",
        ]

    def test_ids_unique_across_catalog(self):
        ids = [tool.id for tool in all_tools()]
        assert len(ids) == len(set(ids))

    def test_find_tool(self):
        tool = find_tool("base-converter")
        assert tool.name == "Binary/Hexadecimal Converter"

    def test_find_missing(self):
        assert find_tool("nope") is None

    def test_duplicate_ids_rejected(self):
        tool = Tool(id="a", name="A", description="")
        with pytest.raises(ValidationError):
            ToolCategory(id="x", name="X", tools=(tool, tool))

    def test_invalid_slug_rejected(self):
        with pytest.raises(ValidationError):
            Tool(id="Not A Slug", name="A", description="")


class TestSearch:
    """Тесты search_tools"""

    def test_case_insensitive_name(self):
        assert [t.id for t in search_tools("STATISTICAL")] == ["statistical-calc"]

    def test_matches_description(self):
        ids = [t.id for t in search_tools("hexadecimal")]
        assert "base-converter" in ids

    def test_limit(self):
        assert len(search_tools("")) == SEARCH_RESULTS_LIMIT
        assert len(search_tools("", limit=2)) == 2

    def test_catalog_order(self):
        results = search_tools("converter")
        ids = [t.id for t in results]
        assert ids == sorted(ids, key=[t.id for t in all_tools()].index)

    def test_no_match(self):
        assert search_tools("zzzz") == []


class TestRegistry:
    """Тесты ToolRegistry"""

    def test_default_registry_resolves_data_tools(self):
        registry = default_registry()
        assert isinstance(registry.resolve("base-converter"), BaseConverter)
        assert isinstance(registry.resolve("unit-converter"), UnitConverter)
        assert isinstance(registry.resolve("statistical-calc"), StatisticalCalculator)

    def test_resolve_creates_fresh_handler(self):
        registry = default_registry()
        assert registry.resolve("base-converter") is not registry.resolve("base-converter")

    def test_catalog_tool_without_handler(self):
        """Инструмент без обработчика — 'Coming soon' (None)"""
        assert default_registry().resolve("port-scanner") is None

    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError, match="nope"):
            default_registry().resolve("nope")

    def test_register_unknown_tool(self):
        with pytest.raises(UnknownToolError):
            ToolRegistry().register("nope", object)

    def test_register_twice(self):
        registry = ToolRegistry()
        registry.register("stopwatch", object)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("stopwatch", object)

    def test_available_tools_in_catalog_order(self):
        registry = default_registry()
        assert [t.id for t in registry.available_tools()] == [
            "unit-converter", "base-converter", "statistical-calc",
        ]
        assert registry.is_available("unit-converter")
        assert not registry.is_available("stopwatch")
