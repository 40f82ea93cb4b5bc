"""
Daily prayer schedule model.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple

# Fixed day order. Only these are candidates for "next prayer".
CANONICAL_PRAYERS = ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha")


def clock_text(value: str) -> str:
    """Leading "HH:MM" token, dropping suffixes like " (EST)"."""
    return str(value).strip().split(" ")[0]


def parse_clock(value: str) -> int:
    """Convert an "HH:MM" value (optionally suffixed, e.g. "05:30 (EST)") to minute-of-day."""
    t = datetime.strptime(clock_text(value), "%H:%M").time()
    return t.hour * 60 + t.minute


def minute_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


@dataclass(frozen=True)
class PrayerEvent:
    name: str
    time: str
    minutes: int = field(compare=False)

    @classmethod
    def from_text(cls, name: str, value: str) -> "PrayerEvent":
        minutes = parse_clock(value)
        return cls(name=name, time=f"{minutes // 60:02d}:{minutes % 60:02d}", minutes=minutes)


@dataclass(frozen=True)
class Schedule:
    events: Tuple[PrayerEvent, ...]
    extras: Tuple[Tuple[str, str], ...] = ()
    date: Optional[str] = None

    @classmethod
    def from_timings(cls, timings: Dict[str, str], date: Optional[str] = None) -> "Schedule":
        """Build a schedule from a raw name -> "HH:MM" mapping.

        Raises ValueError when a canonical prayer is missing or malformed.
        """
        missing = [name for name in CANONICAL_PRAYERS if name not in timings]
        if missing:
            raise ValueError(f"missing timings: {', '.join(missing)}")

        events = tuple(PrayerEvent.from_text(name, timings[name]) for name in CANONICAL_PRAYERS)

        for earlier, later in zip(events, events[1:]):
            if later.minutes < earlier.minutes:
                logging.warning(
                    f"[PRAYER] {later.name} ({later.time}) is before {earlier.name} ({earlier.time})"
                )
                break

        extras = tuple(
            (name, clock_text(value))
            for name, value in timings.items()
            if name not in CANONICAL_PRAYERS
        )
        return cls(events=events, extras=extras, date=date)

    def get(self, name: str) -> Optional[PrayerEvent]:
        for event in self.events:
            if event.name == name:
                return event
        return None

    def __iter__(self):
        return iter(self.events)

    def __len__(self):
        return len(self.events)
