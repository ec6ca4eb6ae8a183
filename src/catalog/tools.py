"""
Tool Catalog — каталог инструментов тулбокса

Immutable Pydantic модели Tool / ToolCategory и полный каталог
категорий в порядке отображения. Идентификатор инструмента — URL slug,
стабильный ключ для маршрутизации и реестра обработчиков.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

# Максимум результатов поиска в командной палитре
SEARCH_RESULTS_LIMIT: Final[int] = 5


# =============================================================================
# MODELS
# =============================================================================


class Tool(BaseModel):
    """Инструмент каталога."""

    id: str = Field(..., min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$", description="URL slug")
    name: str = Field(..., min_length=1, description="Отображаемое имя")
    description: str = Field(..., description="Краткое описание")

    model_config = {"frozen": True}


class ToolCategory(BaseModel):
    """Категория инструментов."""

    id: str = Field(..., min_length=1, description="Идентификатор категории")
    name: str = Field(..., min_length=1, description="Отображаемое имя")
    tools: tuple[Tool, ...] = Field(..., description="Инструменты категории")

    model_config = {"frozen": True}

    @field_validator("tools")
    @classmethod
    def validate_unique_ids(cls, v: tuple[Tool, ...]) -> tuple[Tool, ...]:
        """Идентификаторы инструментов внутри категории уникальны"""
        ids = [tool.id for tool in v]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate tool ids in category: {ids}")
        return v


def _category(category_id: str, name: str, *tools: tuple[str, str, str]) -> ToolCategory:
    return ToolCategory(
        id=category_id,
        name=name,
        tools=tuple(Tool(id=t[0], name=t[1], description=t[2]) for t in tools),
    )


# =============================================================================
# CATALOG
# =============================================================================

TOOL_CATEGORIES: Final[tuple[ToolCategory, ...]] = (
    _category(
        "text", "Text",
        ("markdown-editor", "Markdown Editor", "A complete markdown editor with tools"),
        ("text-case-converter", "Text Case Converter", "Convert text to various cases like camelCase, snake_case"),
        ("json-formatter", "JSON Formatter and Validator", "Format and validate JSON for readability"),
        ("text-encoder-decoder", "Text Encoder/Decoder", "Encode or decode Base64, URL, HTML entities"),
        ("uuid-generator", "UUID Generator", "Generate universally unique identifiers"),
        ("regex-tester", "Regex Tester", "Test and debug regular expressions"),
    ),
    _category(
        "code", "Code",
        ("code-minifier", "Code Minifier", "Minify CSS, JavaScript, and HTML files"),
        ("code-beautifier", "Code Beautifier/Prettifier", "Prettify code for multiple languages"),
        ("hash-generator", "Hash Generator", "Generate MD5, SHA-1, SHA-256 hashes"),
        ("jwt-decoder", "JWT Decoder", "Decode and analyze JSON Web Tokens"),
        ("code-diff-checker", "Code Diff Checker", "Highlight changes between code files"),
    ),
    _category(
        "image", "Image",
        ("image-optimizer", "Image Optimizer", "Compress and optimize images for web use"),
        ("image-resizer", "Image Resizer and Cropper", "Resize or crop images to specific dimensions"),
        ("icon-generator", "Icon Generator", "Convert images to various icon formats"),
        ("color-picker", "Color Picker", "Select colors and get HEX/RGB values"),
        ("color-palette", "Color Palette Generator", "Generate color palettes from an image"),
    ),
    _category(
        "productivity", "Productivity",
        ("random-data", "Random Data Generator", "Generate random data for testing, like names, emails, addresses"),
        ("csv-converter", "CSV to JSON/Excel Converter", "Convert CSV files to JSON or Excel format"),
        ("lorem-ipsum", "Lorem Ipsum Generator", "Generate placeholder text"),
        ("dependency-checker", "Dependency Version Checker", "Check the latest versions of popular libraries"),
        ("task-matrix", "Task Prioritization Matrix", "Sort tasks by urgency and importance"),
        ("timezone-converter", "Time Zone Converter", "Compare time zones easily"),
        ("countdown-timer", "Countdown Timer", "Set custom countdowns for tasks"),
        ("habit-tracker", "Habit Tracker", "Log daily activities or goals"),
        ("stopwatch", "Stopwatch", "Track time for tasks in real-time"),
        ("calendar-scheduler", "Calendar Events Scheduler", "Plan and set reminders for events"),
    ),
    _category(
        "data", "Data",
        ("unit-converter", "Unit Converter", "Convert units of measure (length, weight, volume, etc.)"),
        ("math-evaluator", "Math Expression Evaluator", "Calculate complex math expressions"),
        ("base-converter", "Binary/Hexadecimal Converter", "Convert numbers between decimal, binary, and hexadecimal"),
        ("statistical-calc", "Statistical Calculator", "Calculate mean, median, mode, and standard deviation"),
    ),
    _category(
        "networking", "Networking",
        ("rest-client", "REST Client", "Test API endpoints by sending HTTP requests"),
        ("http-headers", "HTTP Headers Checker", "Check HTTP headers for troubleshooting"),
        ("ip-lookup", "IP Address Lookup", "Find details about IP addresses"),
        ("port-scanner", "Port Scanner", "Check open ports for diagnostics"),
        ("dns-lookup", "DNS Lookup", "Check DNS records for a domain"),
        ("ping-tool", "Ping Tool", "Test connectivity to servers or websites"),
    ),
    _category(
        "security", "Security",
        ("password-generator", "Password Generator", "Generate strong, random passwords"),
        ("encryption-tool", "Encryption/Decryption Tool", "Encrypt or decrypt text with a given key"),
        ("ssl-checker", "SSL Certificate Checker", "Verify SSL certificate details for a domain"),
        ("data-sanitizer", "Data Sanitizer", "Clean sensitive information from text or data files"),
    ),
)


# =============================================================================
# LOOKUP & SEARCH
# =============================================================================


def all_tools(categories: tuple[ToolCategory, ...] = TOOL_CATEGORIES) -> list[Tool]:
    """Плоский список инструментов в порядке каталога."""
    return [tool for category in categories for tool in category.tools]


def find_tool(tool_id: str, categories: tuple[ToolCategory, ...] = TOOL_CATEGORIES) -> Tool | None:
    """Поиск инструмента по id; None если такого нет."""
    for tool in all_tools(categories):
        if tool.id == tool_id:
            return tool
    return None


def search_tools(
    query: str,
    limit: int = SEARCH_RESULTS_LIMIT,
    categories: tuple[ToolCategory, ...] = TOOL_CATEGORIES,
) -> list[Tool]:
    """
    Поиск для командной палитры.

    Регистронезависимое вхождение подстроки в имя или описание,
    порядок каталога, не более limit результатов. Пустой запрос
    совпадает со всеми инструментами.
    """
    needle = query.lower()
    matches = [
        tool
        for tool in all_tools(categories)
        if needle in tool.name.lower() or needle in tool.description.lower()
    ]
    return matches[:limit]
