"""
MixedRadixCounterState — Снимок состояния счётчика

Immutable Pydantic модель, представляющая сериализуемое состояние
MixedRadixCounter. Соответствует схеме src/core/contracts/schema/mixed_radix_counter.json.

Цифры и пределы принимаются только как int (StrictInt): строки, float и bool
отклоняются так же, как их отклоняет конструктор счётчика.

Восстановление счётчика из снимка повторно проходит все проверки
конструктора, поэтому невалидный снимок не может породить невалидный счётчик.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.math.mixed_radix import MixedRadixCounter
from src.core.math.unsigned import UnsignedWidth

# Беззнаковая цифра без приведения типов
UnsignedDigit = Annotated[StrictInt, Field(ge=0)]


class MixedRadixCounterState(BaseModel):
    """
    Снимок счётчика со смешанным основанием.

    Immutable модель (frozen=True). Цифры и пределы перечислены от старшей
    к младшей.
    """

    width: UnsignedWidth = Field(
        default=UnsignedWidth.U64, description="Ширина числового типа цифр"
    )
    limits: list[UnsignedDigit] = Field(..., description="Исключающие верхние границы цифр")
    elements: list[UnsignedDigit] = Field(..., description="Текущие значения цифр")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_digits(self) -> "MixedRadixCounterState":
        """
        Проверка инвариантов счётчика: длины, ширина, elements[i] < limits[i].
        """
        if len(self.elements) != len(self.limits):
            raise ValueError(
                f"elements length {len(self.elements)} does not match "
                f"limits length {len(self.limits)}"
            )

        max_value = self.width.max_value
        for i, (element, limit) in enumerate(zip(self.elements, self.limits)):
            if max_value is not None and limit > max_value:
                raise ValueError(f"limit {limit} at index {i} exceeds {self.width.value} max")
            if element >= limit:
                raise ValueError(f"element {element} at index {i} must be < limit {limit}")
        return self

    @classmethod
    def from_counter(cls, counter: MixedRadixCounter) -> "MixedRadixCounterState":
        """Снимок текущего состояния счётчика"""
        return cls(
            width=counter.width,
            limits=list(counter.limits),
            elements=list(counter.elements),
        )

    def to_counter(self) -> MixedRadixCounter:
        """
        Восстановление независимого счётчика из снимка.

        Raises:
            InvalidValues: Если снимок нарушает инварианты счётчика
        """
        return MixedRadixCounter.from_limits_and_elements(
            self.limits, self.elements, width=self.width
        )
