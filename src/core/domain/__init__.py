"""
Domain models and value objects.

Contains the serializable counter state and the duration preset.
"""

from src.core.domain.counter_state import MixedRadixCounterState
from src.core.domain.duration import (
    DAYS_PER_YEAR,
    DURATION_LIMITS,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
    DurationBreakdown,
    breakdown,
    duration_counter,
)

__all__ = [
    # Counter state model
    "MixedRadixCounterState",
    # Duration module
    "DAYS_PER_YEAR",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "MS_PER_SECOND",
    "DURATION_LIMITS",
    "DurationBreakdown",
    "duration_counter",
    "breakdown",
]
