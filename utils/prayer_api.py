"""
Aladhan prayer times client.
"""

import logging
from typing import Optional

import requests

from core.schedule import Schedule
from utils.config_loader import ScheduleSource


class ScheduleFetchError(Exception):
    """Prayer times could not be fetched or parsed."""


class PrayerTimesProvider:
    """Fetch today's prayer schedule from the Aladhan API for a fixed source."""

    def __init__(self, source: ScheduleSource, session: Optional[requests.Session] = None):
        self.source = source
        self.session = session or requests.Session()

    def fetch(self) -> Schedule:
        src = self.source
        params = {"city": src.city, "country": src.country, "method": src.method}

        logging.info(f"[PRAYER] Fetching prayer times ({src.city}, {src.country})")

        try:
            response = self.session.get(src.api_url, params=params, timeout=src.timeout)
            response.raise_for_status()
            data = response.json()
        except ValueError as e:
            raise ScheduleFetchError(f"invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise ScheduleFetchError(f"request failed: {e}") from e

        if not isinstance(data, dict):
            raise ScheduleFetchError("unexpected response body")
        if data.get("code") != 200:
            raise ScheduleFetchError(f"API returned code={data.get('code')} status={data.get('status')}")

        try:
            payload = data["data"]
            timings = payload["timings"]
            date = (payload.get("date") or {}).get("readable")
            return Schedule.from_timings(timings, date=date)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ScheduleFetchError(f"malformed timings: {e}") from e

    __call__ = fetch
