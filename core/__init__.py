"""Initialize the core package and expose the schedule model."""

from .schedule import (
    CANONICAL_PRAYERS,
    PrayerEvent,
    Schedule,
    minute_of_day,
    parse_clock,
)

__all__ = [
    "CANONICAL_PRAYERS",
    "PrayerEvent",
    "Schedule",
    "minute_of_day",
    "parse_clock",
]
