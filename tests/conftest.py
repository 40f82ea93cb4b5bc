import pytest

from core.schedule import Schedule

TIMINGS = {
    "Fajr": "05:30",
    "Sunrise": "06:45",
    "Dhuhr": "12:15",
    "Asr": "15:40",
    "Sunset": "18:18",
    "Maghrib": "18:20",
    "Isha": "19:45",
    "Imsak": "05:20",
    "Midnight": "00:37",
}


@pytest.fixture
def timings():
    return dict(TIMINGS)


@pytest.fixture
def schedule():
    return Schedule.from_timings(TIMINGS, date="19 Oct 2026")
