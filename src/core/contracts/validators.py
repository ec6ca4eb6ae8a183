"""
JSON Schema Contract Validators

Модуль для валидации данных, передаваемых слою UI, согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (contracts/schema/):
- base_conversion.json   — поля конвертера систем счисления
- unit_conversion.json   — результат конверсии единиц
- statistics_result.json — снапшот статистики выборки
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта — 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'unit_conversion')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BaseConversionValidator(ContractValidator):
    """Валидатор для base_conversion контракта."""

    def __init__(self):
        super().__init__("base_conversion")


class UnitConversionValidator(ContractValidator):
    """Валидатор для unit_conversion контракта."""

    def __init__(self):
        super().__init__("unit_conversion")


class StatisticsResultValidator(ContractValidator):
    """Валидатор для statistics_result контракта."""

    def __init__(self):
        super().__init__("statistics_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_base_conversion(data: Dict[str, Any]) -> None:
    """
    Валидация полей конвертера систем счисления.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BaseConversionValidator().validate(data)


def validate_unit_conversion(data: Dict[str, Any]) -> None:
    """
    Валидация результата конверсии единиц.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UnitConversionValidator().validate(data)


def validate_statistics_result(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота статистики.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    StatisticsResultValidator().validate(data)
