"""
Tests for MixedRadixCounterState and the mixed_radix_counter contract

Покрывает:
- Создание снимка из счётчика и восстановление счётчика
- Валидацию инвариантов в Pydantic модели
- JSON сериализацию и соответствие JSON Schema
- Immutability (frozen=True)
- Детекцию нарушений контракта
"""

import json
from importlib import resources
from pathlib import Path

import jsonschema
import pytest
from pydantic import ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    MixedRadixCounterValidator,
    SchemaLoader,
    validate_mixed_radix_counter,
)
from src.core.domain import MixedRadixCounterState
from src.core.math import U64_MAX, InvalidValues, MixedRadixCounter, UnsignedWidth


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def counter():
    """Счётчик в ненулевом состоянии."""
    counter = MixedRadixCounter.from_limits([U64_MAX, 365, 24, 60, 60, 1000])
    counter.add(69_413_798)
    return counter


@pytest.fixture
def valid_state_data():
    """Валидные сериализованные данные."""
    return {"width": "u8", "limits": [2, 4, 3], "elements": [1, 3, 2]}


# =============================================================================
# TESTS: MixedRadixCounterState
# =============================================================================


def test_state_from_counter(counter):
    state = MixedRadixCounterState.from_counter(counter)

    assert state.width is UnsignedWidth.U64
    assert state.limits == [U64_MAX, 365, 24, 60, 60, 1000]
    assert state.elements == [0, 0, 19, 16, 53, 798]


def test_state_round_trip(counter):
    """Восстановленный счётчик равен исходному и независим от него."""
    restored = MixedRadixCounterState.from_counter(counter).to_counter()

    assert restored == counter
    assert restored.width is counter.width

    restored.increment()
    assert restored != counter
    assert counter.elements == (0, 0, 19, 16, 53, 798)


def test_state_from_dict(valid_state_data):
    state = MixedRadixCounterState(**valid_state_data)
    restored = state.to_counter()

    assert state.width is UnsignedWidth.U8
    assert restored.elements == (1, 3, 2)
    assert restored.increment() == 1


def test_state_default_width():
    state = MixedRadixCounterState(limits=[3], elements=[2])
    assert state.width is UnsignedWidth.U64


def test_state_immutability(valid_state_data):
    state = MixedRadixCounterState(**valid_state_data)
    with pytest.raises(ValidationError):
        state.width = UnsignedWidth.U16


@pytest.mark.parametrize(
    "data, message",
    [
        ({"limits": [2, 4], "elements": [1]}, "does not match"),
        ({"limits": [2, 4], "elements": [2, 0]}, "must be < limit"),
        ({"limits": [0], "elements": [0]}, "must be < limit"),
        ({"limits": [2], "elements": [-1]}, "greater than or equal to 0"),
        ({"limits": ["2"], "elements": [0]}, "valid integer"),
        ({"limits": [2], "elements": [True]}, "valid integer"),
        ({"limits": [2.0], "elements": [0]}, "valid integer"),
        ({"width": "u8", "limits": [256], "elements": [0]}, "exceeds u8 max"),
        ({"width": "i8", "limits": [2], "elements": [0]}, "width"),
    ],
)
def test_state_rejects_invalid_data(data, message):
    with pytest.raises(ValidationError, match=message):
        MixedRadixCounterState(**data)


def test_state_matches_counter_on_non_integer_digits():
    """Снимок и конструктор счётчика одинаково отклоняют не-int цифры."""
    with pytest.raises(InvalidValues):
        MixedRadixCounter.from_limits_and_elements([2.0], [True])
    with pytest.raises(ValidationError):
        MixedRadixCounterState(limits=[2.0], elements=[True])
    with pytest.raises(ValidationError):
        MixedRadixCounterState(limits=["2"], elements=[True])


def test_state_json_serialization(counter):
    """JSON-дамп снимка соответствует JSON Schema."""
    json_data = MixedRadixCounterState.from_counter(counter).model_dump(mode="json")

    assert json_data["width"] == "u64"
    validate_mixed_radix_counter(json_data)


def test_state_json_deserialization(counter):
    state = MixedRadixCounterState.from_counter(counter)
    json_data = state.model_dump(mode="json")

    restored = MixedRadixCounterState(**json_data)

    assert restored == state
    assert restored.to_counter() == counter


def test_to_counter_reports_invalid_values_for_constructed_state():
    """model_construct обходит валидацию, to_counter проверяет снова."""
    state = MixedRadixCounterState.model_construct(
        width=UnsignedWidth.U64, limits=[2], elements=[5]
    )
    with pytest.raises(InvalidValues):
        state.to_counter()


# =============================================================================
# TESTS: JSON Schema contract
# =============================================================================


def test_schema_loads_and_is_cached():
    loader = SchemaLoader()
    schema = loader.load_schema("mixed_radix_counter")

    assert schema["title"] == "MixedRadixCounterState"
    assert loader.load_schema("mixed_radix_counter") is schema


def test_missing_schema_raises():
    with pytest.raises(FileNotFoundError):
        SchemaLoader().load_schema("does_not_exist")


def test_schema_dir_ships_inside_package():
    """Схемы лежат в пакете src.core.contracts и доступны как package data."""
    import src.core.contracts.validators as validators

    assert SCHEMA_DIR == Path(validators.__file__).parent / "schema"
    assert SchemaLoader().schema_dir == SCHEMA_DIR

    packaged = resources.files("src.core.contracts").joinpath("schema").joinpath(
        "mixed_radix_counter.json"
    )
    assert packaged.is_file()
    assert json.loads(packaged.read_text(encoding="utf-8")) == SchemaLoader().load_schema(
        "mixed_radix_counter"
    )


def test_schema_loader_custom_dir(tmp_path):
    (tmp_path / "tiny.json").write_text(
        json.dumps({"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "integer"}),
        encoding="utf-8",
    )
    loader = SchemaLoader(schema_dir=tmp_path)

    assert loader.load_schema("tiny")["type"] == "integer"
    with pytest.raises(FileNotFoundError):
        loader.load_schema("mixed_radix_counter")


def test_schema_loader_missing_dir(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(schema_dir=tmp_path / "absent")


def test_contract_accepts_valid_data(valid_state_data):
    validator = MixedRadixCounterValidator()
    assert validator.is_valid(valid_state_data)
    validator.validate(valid_state_data)


@pytest.mark.parametrize(
    "patch",
    [
        {"width": "i64"},
        {"limits": [0, 4, 3]},
        {"elements": [1, -3, 2]},
        {"elements": [1, 3.5, 2]},
        {"extra": True},
    ],
)
def test_contract_rejects_invalid_data(valid_state_data, patch):
    data = {**valid_state_data, **patch}
    with pytest.raises(jsonschema.ValidationError):
        validate_mixed_radix_counter(data)


def test_contract_requires_all_fields(valid_state_data):
    for field in ("width", "limits", "elements"):
        data = dict(valid_state_data)
        del data[field]
        assert not MixedRadixCounterValidator().is_valid(data)


def test_contract_iter_errors_reports_every_violation():
    data = {"width": "bogus", "limits": [0], "elements": [-1]}
    errors = list(MixedRadixCounterValidator().iter_errors(data))
    assert len(errors) == 3
