"""
Tests for JSON Schema Contract Validators

Проверяет:
- Валидность самой схемы calculation_result
- Валидацию правильных данных (успех и ошибка)
- Детекцию нарушений required полей, типов и enum
- Интеграцию с Pydantic моделью CalculationResult
"""

import json
import math

import pytest
from jsonschema import ValidationError

from infixcalc import evaluate_expression
from infixcalc.contracts import (
    CalculationResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_result,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_success():
    """Валидный успешный результат."""
    return {
        "expression": "1 + 2 * 5",
        "tokens": ["1", "+", "2", "*", "5"],
        "postfix": ["1", "2", "5", "*", "+"],
        "value": 11.0,
        "error": None,
    }


@pytest.fixture
def valid_failure():
    """Валидный результат с ошибкой."""
    return {
        "expression": "(1+2",
        "tokens": ["(", "1", "+", "2"],
        "postfix": [],
        "value": None,
        "error": {"kind": "MismatchedParentheses", "message": "mismatched parentheses"},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и кэширование схем"""

    def test_load_schema(self) -> None:
        schema = SchemaLoader().load_schema("calculation_result")
        assert schema["$id"] == "calculation_result"
        assert "properties" in schema

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("calculation_result") is loader.load_schema("calculation_result")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(schema_dir=tmp_path / "nope")

    def test_validator_with_custom_loader(self, tmp_path) -> None:
        """ContractValidator использует переданный SchemaLoader"""
        schema = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "required": ["expression"],
        }
        (tmp_path / "minimal.json").write_text(json.dumps(schema), encoding="utf-8")

        validator = ContractValidator("minimal", loader=SchemaLoader(schema_dir=tmp_path))

        assert validator.schema_name == "minimal"
        assert validator.is_valid({"expression": "1+1"})
        assert not validator.is_valid({})

    def test_invalid_schema_file(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")


# =============================================================================
# VALIDATION
# =============================================================================


class TestCalculationResultContract:
    """Валидация calculation_result"""

    def test_valid_success(self, valid_success) -> None:
        validate_calculation_result(valid_success)

    def test_valid_failure(self, valid_failure) -> None:
        validate_calculation_result(valid_failure)

    def test_infinite_value_is_number(self, valid_success) -> None:
        valid_success["value"] = math.inf
        validate_calculation_result(valid_success)

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
    def test_non_finite_string_value(self, valid_success, value: str) -> None:
        valid_success["value"] = value
        validate_calculation_result(valid_success)

    @pytest.mark.parametrize("value", ["Infinity", "NaN", "+inf"])
    def test_unknown_non_finite_spelling_rejected(self, valid_success, value: str) -> None:
        valid_success["value"] = value
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_non_finite_string_with_error_rejected(self, valid_failure) -> None:
        valid_failure["value"] = "nan"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_failure)

    @pytest.mark.parametrize("field", ["expression", "tokens", "postfix", "value", "error"])
    def test_missing_required_field(self, valid_success, field: str) -> None:
        del valid_success[field]
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_value_and_error_both_set(self, valid_success, valid_failure) -> None:
        valid_success["error"] = valid_failure["error"]
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_value_and_error_both_null(self, valid_success) -> None:
        valid_success["value"] = None
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_unknown_error_kind(self, valid_failure) -> None:
        valid_failure["error"]["kind"] = "DivisionByZero"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_failure)

    def test_value_wrong_type(self, valid_success) -> None:
        valid_success["value"] = "11"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_empty_token_rejected(self, valid_success) -> None:
        valid_success["tokens"] = ["1", ""]
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_success)

    def test_additional_property_rejected(self, valid_success) -> None:
        valid_success["extra"] = 1
        validator = CalculationResultValidator()
        assert not validator.is_valid(valid_success)
        assert len(list(validator.iter_errors(valid_success))) >= 1


class TestPydanticIntegration:
    """model_dump() CalculationResult соответствует контракту"""

    @pytest.mark.parametrize(
        "expression",
        ["1 + 2 * 5", "(1+2", "1+2)", "+ 3", "2x", "1 2", "", "1/0", "0/0"],
    )
    def test_dump_conforms(self, expression: str) -> None:
        payload = evaluate_expression(expression).model_dump(mode="python")
        assert CalculationResultValidator().is_valid(payload)
