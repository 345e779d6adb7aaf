"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованного состояния счётчика.
"""

from .validators import (
    ContractValidator,
    SCHEMA_DIR,
    MixedRadixCounterValidator,
    SchemaLoader,
    validate_mixed_radix_counter,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MixedRadixCounterValidator",
    # Functions
    "validate_mixed_radix_counter",
]
