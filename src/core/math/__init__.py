"""
Core math modules

Счётчик со смешанным основанием и беззнаковые примитивы под ним.
"""

# Unsigned widths
from src.core.math.unsigned import (
    # Constants
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    # Types
    UnsignedOverflowError,
    UnsignedWidth,
    # Functions
    checked_add,
    validate_unsigned,
)

# Mixed-radix counter
from src.core.math.mixed_radix import (
    InvalidValues,
    MixedRadixCounter,
)

__all__ = [
    # Unsigned — Constants
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    # Unsigned — Exceptions
    "UnsignedOverflowError",
    # Unsigned — Types
    "UnsignedWidth",
    # Unsigned — Functions
    "checked_add",
    "validate_unsigned",
    # Mixed-radix — Exceptions
    "InvalidValues",
    # Mixed-radix — Types
    "MixedRadixCounter",
]
