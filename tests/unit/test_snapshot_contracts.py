"""
Tests for NumberSnapshot model and JSON Schema contract

Проверяет:
- Валидность самой схемы
- Валидацию правильных данных
- Детекцию нарушений required полей, типов и constraints
- Pydantic модель NumberSnapshot (валидация, нормализация, immutability)
- Согласованность модели и схемы
"""

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from ringnum.core.contracts import (
    NumberSnapshotValidator,
    SchemaLoader,
    validate_number_snapshot,
)
from ringnum.core.contracts import validators
from ringnum.core.domain import NumberList, NumberSnapshot


@pytest.fixture
def valid_snapshot():
    """Валидный number_snapshot для тестирования."""
    return {"base": 3, "decimal": "15"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_loads_and_caches(self) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema("number_snapshot")
        assert schema["title"] == "number_snapshot"
        assert loader.load_schema("number_snapshot") is schema

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CONTRACT
# =============================================================================


class TestNumberSnapshotContract:
    """Валидация number_snapshot"""

    def test_valid_data(self, valid_snapshot) -> None:
        validate_number_snapshot(valid_snapshot)
        assert NumberSnapshotValidator().is_valid(valid_snapshot)

    def test_missing_required_field(self, valid_snapshot) -> None:
        del valid_snapshot["decimal"]
        with pytest.raises(ValidationError, match="'decimal' is a required property"):
            validate_number_snapshot(valid_snapshot)

    def test_wrong_types(self) -> None:
        validator = NumberSnapshotValidator()
        assert not validator.is_valid({"base": "3", "decimal": "15"})
        assert not validator.is_valid({"base": 3, "decimal": 15})

    def test_constraints(self) -> None:
        validator = NumberSnapshotValidator()
        assert not validator.is_valid({"base": 1, "decimal": "15"})
        assert not validator.is_valid({"base": 3, "decimal": ""})
        assert not validator.is_valid({"base": 3, "decimal": "1.5"})

    def test_additional_properties_rejected(self, valid_snapshot) -> None:
        valid_snapshot["digits"] = [1, 2, 0]
        assert not NumberSnapshotValidator().is_valid(valid_snapshot)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(NumberSnapshotValidator().iter_errors({"base": 0, "decimal": "x"}))
        assert len(errors) == 2

    def test_validator_reused_between_calls(self, monkeypatch, valid_snapshot) -> None:
        """Схема не компилируется заново на каждый вызов validate_number_snapshot"""

        def _compile_again(*args, **kwargs):
            raise AssertionError("schema compiled on validate call")

        monkeypatch.setattr(validators, "Draft202012Validator", _compile_again)

        validate_number_snapshot(valid_snapshot)
        with pytest.raises(ValidationError):
            validate_number_snapshot({"base": 3})


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class TestNumberSnapshotModel:
    """Тесты модели NumberSnapshot"""

    def test_from_number(self) -> None:
        snapshot = NumberSnapshot.from_number(NumberList(3, [1, 2, 0]))
        assert snapshot.base == 3
        assert snapshot.decimal == "15"

    def test_empty_number_snapshot_is_zero(self) -> None:
        assert NumberSnapshot.from_number(NumberList(5)).decimal == "0"

    def test_to_number(self) -> None:
        number = NumberSnapshot(base=8, decimal="15").to_number()
        assert number.base == 8
        assert list(number) == [1, 7]

    def test_leading_zeros_normalized(self) -> None:
        assert NumberSnapshot(base=3, decimal="0015").decimal == "15"
        assert NumberSnapshot(base=3, decimal="000").decimal == "0"

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            NumberSnapshot(base=1, decimal="15")
        with pytest.raises(PydanticValidationError):
            NumberSnapshot(base=3, decimal="-15")
        with pytest.raises(PydanticValidationError):
            NumberSnapshot(base=3, decimal="")

    def test_frozen(self) -> None:
        snapshot = NumberSnapshot(base=3, decimal="15")
        with pytest.raises(PydanticValidationError):
            snapshot.base = 4

    def test_model_dump_satisfies_contract(self) -> None:
        snapshot = NumberSnapshot.from_number(NumberList(16, [15, 15]))
        validate_number_snapshot(snapshot.model_dump())
