"""
Utils Package
-------------
Provides helper modules for configuration loading, logging and the prayer times API.
"""

from .config_loader import load_config, scheduler_settings, ScheduleSource
from .logger import setup_logging
from .prayer_api import PrayerTimesProvider, ScheduleFetchError

__all__ = [
    "load_config",
    "scheduler_settings",
    "ScheduleSource",
    "setup_logging",
    "PrayerTimesProvider",
    "ScheduleFetchError",
]
