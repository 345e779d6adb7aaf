"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы лежат внутри пакета, в src/core/contracts/schema/, и устанавливаются
вместе с ним как package data:
- mixed_radix_counter.json (сериализованное состояние счётчика)

Схема проверяет только форму и типы. Соотношение elements[i] < limits[i]
проверяет MixedRadixCounterState.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Optional

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем рядом с этим модулем
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из SCHEMA_DIR и кэширует их по имени.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        """
        Args:
            schema_dir: Каталог со схемами (default: SCHEMA_DIR)

        Raises:
            RuntimeError: Если каталог не существует
        """
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'mixed_radix_counter')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
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


class MixedRadixCounterValidator(ContractValidator):
    """
    Валидатор для mixed_radix_counter контракта.
    """

    def __init__(self):
        super().__init__("mixed_radix_counter")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_mixed_radix_counter(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного состояния счётчика.

    Args:
        data: Данные для валидации (например, state.model_dump(mode="json"))

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MixedRadixCounterValidator().validate(data)
