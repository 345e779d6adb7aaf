"""
Mixed-Radix Counter — Счётчик со смешанным основанием

Одометр фиксированной длины, где каждая цифра имеет собственный предел
(radix). Индекс 0 — старшая цифра, индекс N-1 — младшая. Перенос идёт
от младшей цифры к старшей.

Пример: разбиение длительности на [годы, дни, часы, минуты, секунды, мс]
с пределами [u64::MAX, 365, 24, 60, 60, 1000].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(elements) == len(limits) == N, N не меняется после создания
2. 0 <= elements[i] < limits[i] для каждого i
3. Цифры меняются только через increment() и add()
4. Переполнение счётчика — не ошибка, а возвращаемое значение
"""

import logging
from functools import total_ordering
from typing import Iterator, Optional, Sequence

from src.core.math.unsigned import UnsignedWidth, checked_add, validate_unsigned

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidValues(ValueError):
    """
    Предложенная цифра не строго меньше своего предела.

    Единственная ошибка конструирования счётчика. Сообщение указывает
    индекс нарушения (только для диагностики).
    """

    pass


# =============================================================================
# MIXED-RADIX COUNTER
# =============================================================================


@total_ordering
class MixedRadixCounter:
    """
    Счётчик со смешанным основанием фиксированной длины.

    Равенство и порядок — лексикографические по (elements, limits).
    Экземпляры изменяемы, поэтому не хешируются.
    """

    __slots__ = ("_elements", "_limits", "_width")

    def __init__(
        self,
        limits: Sequence[int],
        elements: Optional[Sequence[int]] = None,
        width: UnsignedWidth = UnsignedWidth.U64,
    ):
        """
        Args:
            limits: Исключающие верхние границы цифр (старшая первой)
            elements: Начальные значения цифр (default: все нули)
            width: Ширина числового типа цифр

        Raises:
            InvalidValues: Если хотя бы одна цифра не удовлетворяет инвариантам
        """
        width = UnsignedWidth(width)
        limits = tuple(limits)
        elements = (0,) * len(limits) if elements is None else tuple(elements)

        _validate_digits(limits, elements, width)

        self._limits: tuple[int, ...] = limits
        self._elements: list[int] = list(elements)
        self._width = width

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_limits(
        cls, limits: Sequence[int], width: UnsignedWidth = UnsignedWidth.U64
    ) -> "MixedRadixCounter":
        """
        Счётчик с нулевыми цифрами.

        Raises:
            InvalidValues: Если какой-либо limits[i] == 0
        """
        return cls(limits, width=width)

    @classmethod
    def from_limits_and_elements(
        cls,
        limits: Sequence[int],
        elements: Sequence[int],
        width: UnsignedWidth = UnsignedWidth.U64,
    ) -> "MixedRadixCounter":
        """
        Счётчик с явными начальными цифрами.

        Валидация "всё или ничего": счётчик либо полностью валиден, либо
        не создаётся.

        Raises:
            InvalidValues: На первом i, где elements[i] >= limits[i]
        """
        return cls(limits, elements=elements, width=width)

    # -------------------------------------------------------------------------
    # Read-only доступ
    # -------------------------------------------------------------------------

    @property
    def elements(self) -> tuple[int, ...]:
        """Текущие цифры (старшая первой)"""
        return tuple(self._elements)

    @property
    def limits(self) -> tuple[int, ...]:
        return self._limits

    @property
    def width(self) -> UnsignedWidth:
        return self._width

    @property
    def capacity(self) -> int:
        """Количество различных состояний: произведение всех пределов"""
        result = 1
        for limit in self._limits:
            result *= limit
        return result

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._elements[index])
        return self._elements[index]

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._elements))

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def increment(self) -> Optional[int]:
        """
        Увеличение счётчика ровно на единицу.

        Returns:
            None если переполнения нет, 1 если все цифры "провернулись" в ноль

        Examples:
            >>> counter = MixedRadixCounter.from_limits([2, 2])
            >>> counter.increment(), counter.elements
            (None, (0, 1))
            >>> counter.increment(), counter.elements
            (None, (1, 0))
        """
        for i in reversed(range(len(self._elements))):
            # elements[i] < limits[i] <= max_value, поэтому +1 помещается в тип
            candidate = checked_add(self._elements[i], 1, self._width)
            if candidate < self._limits[i]:
                self._elements[i] = candidate
                return None
            self._elements[i] = 0

        logger.debug("Counter %r wrapped around on increment", self._limits)
        return 1

    def add(self, value: int) -> Optional[int]:
        """
        Прибавление произвольного неотрицательного значения с переносом.

        Для каждой цифры от младшей к старшей: sum = elements[i] + carry;
        если sum < limits[i], цифра сохраняется и сканирование завершается,
        иначе цифра = sum % limit, carry = sum // limit.

        Промежуточная сумма может превышать max_value, но Python int не
        "заворачивается", и после divmod цифра < limit <= max_value, а
        остаточный carry никогда не превышает value.

        Args:
            value: Прибавляемое значение, 0 <= value <= width.max_value

        Returns:
            None если переполнения нет, иначе остаток, не поместившийся в счётчик

        Raises:
            TypeError: Если value не int
            ValueError: Если value отрицательное или не помещается в width

        Examples:
            >>> counter = MixedRadixCounter.from_limits([2])
            >>> counter.add(3), counter.elements
            (1, (1,))
        """
        validate_unsigned(value, self._width, name="value")

        if not self._elements:
            return value or None

        carry = value
        for i in reversed(range(len(self._elements))):
            limit = self._limits[i]
            # точная сумма: может быть > max_value, сужается через divmod ниже
            total = self._elements[i] + carry

            if total < limit:
                self._elements[i] = total
                return None

            carry, self._elements[i] = divmod(total, limit)

            if i == 0 and carry != 0:
                logger.debug(
                    "Counter %r overflowed on add(%d), residual carry %d",
                    self._limits,
                    value,
                    carry,
                )
                return carry

        return None

    # -------------------------------------------------------------------------
    # Служебное
    # -------------------------------------------------------------------------

    def copy(self) -> "MixedRadixCounter":
        """Независимая копия счётчика"""
        clone = object.__new__(type(self))
        clone._limits = self._limits
        clone._elements = list(self._elements)
        clone._width = self._width
        return clone

    def _key(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        return (tuple(self._elements), self._limits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MixedRadixCounter):
            return NotImplemented
        return self._key() < other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"MixedRadixCounter(elements={list(self._elements)}, "
            f"limits={list(self._limits)}, width={self._width.value!r})"
        )


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _validate_digits(
    limits: tuple[int, ...], elements: tuple[int, ...], width: UnsignedWidth
) -> None:
    """
    Проверка инвариантов цифр.

    Raises:
        InvalidValues: При несовпадении длин, непредставимом значении
            или elements[i] >= limits[i]
    """
    if len(elements) != len(limits):
        logger.debug("Rejected counter: %d elements for %d limits", len(elements), len(limits))
        raise InvalidValues(
            f"elements length {len(elements)} does not match limits length {len(limits)}"
        )

    for i, (element, limit) in enumerate(zip(elements, limits)):
        if not width.is_representable(limit) or not width.is_representable(element):
            logger.debug("Rejected counter: digit %d not representable in %s", i, width.value)
            raise InvalidValues(
                f"digit {i}: element {element!r} / limit {limit!r} "
                f"not representable as {width.value}"
            )
        if element >= limit:
            logger.debug("Rejected counter: digit %d element %d >= limit %d", i, element, limit)
            raise InvalidValues(f"digit {i}: element {element} >= limit {limit}")
