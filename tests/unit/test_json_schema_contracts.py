"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация payload обработчиков инструментов
- Детекция нарушений required полей, типов и constraints
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BaseConversionValidator,
    SchemaLoader,
    StatisticsResultValidator,
    UnitConversionValidator,
    validate_base_conversion,
    validate_statistics_result,
    validate_unit_conversion,
)
from src.core.domain.numeral import Base
from src.core.domain.statistics import compute_statistics
from src.tools import BaseConverter, UnitConverter, base_convert
from src.tools.statistical_calculator import statistics_payload


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["base_conversion", "unit_conversion", "statistics_result"])
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)
        assert schema["title"] == name

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_cache(self):
        loader = SchemaLoader()
        assert loader.load_schema("unit_conversion") is loader.load_schema("unit_conversion")


# =============================================================================
# BASE CONVERSION
# =============================================================================


class TestBaseConversionContract:
    """Контракт полей конвертера систем счисления"""

    def test_valid_result(self):
        validate_base_conversion(base_convert("1010", Base.BIN).to_payload())

    def test_empty_result(self):
        validate_base_conversion(base_convert("", Base.BIN).to_payload())

    def test_error_state_allows_literal_text(self):
        converter = BaseConverter()
        converter.on_digits_changed("15", Base.DEC)
        payload = converter.on_digits_changed("1x", Base.DEC).to_payload()
        validate_base_conversion(payload)

    def test_lowercase_hex_without_error_rejected(self):
        payload = {"bin": "1010", "oct": "12", "dec": "10", "hex": "a"}
        assert not BaseConversionValidator().is_valid(payload)

    def test_leading_zero_decimal_rejected(self):
        payload = {"bin": "1", "oct": "1", "dec": "01", "hex": "1"}
        with pytest.raises(ValidationError):
            validate_base_conversion(payload)

    def test_missing_field(self):
        errors = list(BaseConversionValidator().iter_errors({"bin": "1"}))
        assert errors


# =============================================================================
# UNIT CONVERSION
# =============================================================================


class TestUnitConversionContract:
    """Контракт результата конверсии единиц"""

    def test_valid_result(self):
        converter = UnitConverter()
        converter.on_value_text_changed("3")
        validate_unit_conversion(converter.current().to_payload())

    def test_unknown_category_rejected(self):
        payload = UnitConverter().current().to_payload()
        payload["category"] = "volume"
        assert not UnitConversionValidator().is_valid(payload)


# =============================================================================
# STATISTICS
# =============================================================================


class TestStatisticsContract:
    """Контракт снапшота статистики"""

    def test_no_mode(self):
        validate_statistics_result(statistics_payload(compute_statistics("1,2,3", ",")))

    def test_with_mode(self):
        validate_statistics_result(statistics_payload(compute_statistics("5,5,5,2", ",")))

    def test_empty_mode_list_rejected(self):
        payload = statistics_payload(compute_statistics("1,2,3", ","))
        payload["mode"] = []
        assert not StatisticsResultValidator().is_valid(payload)

    def test_negative_variance_rejected(self):
        payload = statistics_payload(compute_statistics("1,2,3", ","))
        payload["variance"] = -1.0
        with pytest.raises(ValidationError):
            validate_statistics_result(payload)
