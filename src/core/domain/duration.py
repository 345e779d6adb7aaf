"""
Duration — Разбиение длительности на календарные единицы

Пресет одометра: [годы, дни, часы, минуты, секунды, миллисекунды].
Год считается равным 365 дням, старшая цифра (годы) ограничена u64.
"""

from typing import Final, NamedTuple

from src.core.math.mixed_radix import MixedRadixCounter
from src.core.math.unsigned import U64_MAX, UnsignedWidth

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DAYS_PER_YEAR: Final[int] = 365
HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60
MS_PER_SECOND: Final[int] = 1000

DURATION_LIMITS: Final[tuple[int, ...]] = (
    U64_MAX,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    MS_PER_SECOND,
)


class DurationBreakdown(NamedTuple):
    """Цифры duration-счётчика по именам"""

    years: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


def duration_counter(elapsed_ms: int = 0) -> MixedRadixCounter:
    """
    Duration-счётчик, выставленный на elapsed_ms миллисекунд.

    Args:
        elapsed_ms: Прошедшее время в миллисекундах (u64)

    Returns:
        MixedRadixCounter с пределами DURATION_LIMITS

    Raises:
        TypeError: Если elapsed_ms не int
        ValueError: Если elapsed_ms отрицательное или не помещается в u64

    Examples:
        >>> duration_counter(69_413_798).elements
        (0, 0, 19, 16, 53, 798)
    """
    # ёмкость DURATION_LIMITS больше U64_MAX, переполнение невозможно
    counter = MixedRadixCounter.from_limits(DURATION_LIMITS, width=UnsignedWidth.U64)
    counter.add(elapsed_ms)
    return counter


def breakdown(counter: MixedRadixCounter) -> DurationBreakdown:
    """
    Именованное представление цифр duration-счётчика.

    Raises:
        ValueError: Если пределы счётчика отличаются от DURATION_LIMITS
    """
    if counter.limits != DURATION_LIMITS:
        raise ValueError(f"Counter limits {list(counter.limits)} are not DURATION_LIMITS")
    return DurationBreakdown(*counter.elements)
