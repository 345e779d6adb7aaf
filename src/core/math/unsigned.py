"""
Unsigned Widths — Беззнаковые целочисленные типы фиксированной ширины

Модуль моделирует числовой тип цифр счётчика (u8/u16/u32/u64/u128 или
неограниченный int) и даёт безопасные примитивы над ним:
- Проверка представимости значения в заданной ширине
- Сложение с контролем переполнения (checked)
- Валидация аргументов с понятными сообщениями об ошибках

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не считается целым значением
2. Отрицательные значения никогда не представимы
3. Checked-сложение никогда не "заворачивает" результат молча
"""

from enum import Enum
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

U8_MAX: Final[int] = 2**8 - 1
U16_MAX: Final[int] = 2**16 - 1
U32_MAX: Final[int] = 2**32 - 1
U64_MAX: Final[int] = 2**64 - 1
U128_MAX: Final[int] = 2**128 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsignedOverflowError(OverflowError):
    """
    Результат checked-операции не помещается в ширину типа.
    """

    pass


# =============================================================================
# ШИРИНЫ
# =============================================================================


class UnsignedWidth(str, Enum):
    """Ширина беззнакового целого типа"""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    UNBOUNDED = "unbounded"

    @property
    def bits(self) -> Optional[int]:
        """Количество бит (None для неограниченного типа)"""
        if self is UnsignedWidth.UNBOUNDED:
            return None
        return int(self.value[1:])

    @property
    def max_value(self) -> Optional[int]:
        """Максимальное представимое значение (None для неограниченного типа)"""
        bits = self.bits
        if bits is None:
            return None
        return 2**bits - 1

    def is_representable(self, value: object) -> bool:
        """
        Проверка, что значение является допустимым беззнаковым целым этой ширины.

        Examples:
            >>> UnsignedWidth.U8.is_representable(255)
            True
            >>> UnsignedWidth.U8.is_representable(256)
            False
            >>> UnsignedWidth.U8.is_representable(True)
            False
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value < 0:
            return False
        max_value = self.max_value
        return max_value is None or value <= max_value


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int, width: UnsignedWidth) -> int:
    """
    Сложение двух беззнаковых значений с контролем переполнения.

    Python int имеет произвольную точность, поэтому сумма вычисляется точно;
    результат больше width.max_value считается переполнением типа.

    Args:
        a: Первое слагаемое (должно быть представимо в width)
        b: Второе слагаемое (должно быть представимо в width)
        width: Ширина типа

    Returns:
        a + b

    Raises:
        UnsignedOverflowError: Если сумма > width.max_value

    Examples:
        >>> checked_add(200, 55, UnsignedWidth.U8)
        255
        >>> checked_add(255, 0, UnsignedWidth.U8)
        255
    """
    total = a + b
    max_value = width.max_value
    if max_value is not None and total > max_value:
        raise UnsignedOverflowError(
            f"{a} + {b} = {total} exceeds {width.value} max {max_value}"
        )
    return total


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_unsigned(value: object, width: UnsignedWidth, name: str = "value") -> None:
    """
    Проверка, что значение является беззнаковым целым заданной ширины.

    Args:
        value: Проверяемое значение
        width: Ширина типа
        name: Имя параметра для сообщения об ошибке

    Raises:
        TypeError: Если значение не int (или является bool)
        ValueError: Если значение отрицательное или больше width.max_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    max_value = width.max_value
    if max_value is not None and value > max_value:
        raise ValueError(f"{name} {value} exceeds {width.value} max {max_value}")
