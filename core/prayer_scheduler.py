import enum
import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from core.display import show_next_prayer
from core.schedule import PrayerEvent, Schedule, minute_of_day
from utils.prayer_api import ScheduleFetchError

POLL_INTERVAL = 60
RETRY_DELAY = 60

ALERT_TITLE = "Prayer Time"


def get_next_prayer(now: int, schedule: Schedule) -> PrayerEvent:
    """First prayer strictly after `now` (minute-of-day), else the first prayer of the day.

    A prayer whose time equals `now` counts as already current.
    """
    events = schedule.events
    if not events:
        raise ValueError("schedule has no prayers")

    for event in events:
        if now < event.minutes:
            return event

    return events[0]


def alert_message(event: PrayerEvent) -> str:
    return f"It's time for {event.name} prayer."


class LoopState(enum.Enum):
    FETCHING = "fetching"
    RETRY_WAIT = "retry_wait"
    SELECTING = "selecting"
    MATCHED = "matched"
    IDLE = "idle"
    SLEEPING = "sleeping"
    STOPPED = "stopped"


class PrayerPollLoop:
    """Refresh the schedule every minute and alert when a prayer time is reached."""

    def __init__(
            self,
            fetch_schedule: Callable[[], Schedule],
            notify: Callable[[str, str], object],
            clock: Callable[[], datetime] = datetime.now,
            stop_event: Optional[threading.Event] = None,
            poll_interval: float = POLL_INTERVAL,
            retry_delay: float = RETRY_DELAY,
            status: Callable[[PrayerEvent], None] = show_next_prayer,
    ):
        self.fetch_schedule = fetch_schedule
        self.notify = notify
        self.clock = clock
        self.stop_event = stop_event or threading.Event()
        self.poll_interval = poll_interval
        self.retry_delay = retry_delay
        self.status = status

        self.state = LoopState.FETCHING
        self.last_event: Optional[PrayerEvent] = None

    def _now(self) -> int:
        return minute_of_day(self.clock())

    def run_cycle(self) -> LoopState:
        """One fetch → select → match pass. Returns RETRY_WAIT, MATCHED or IDLE."""
        self.state = LoopState.FETCHING
        try:
            schedule = self.fetch_schedule()
        except ScheduleFetchError as e:
            logging.error(f"[SCHED] Failed to fetch prayer times: {e}")
            self.state = LoopState.RETRY_WAIT
            return self.state

        self.state = LoopState.SELECTING
        event = get_next_prayer(self._now(), schedule)
        self.last_event = event
        self.status(event)

        # The fetch and selection take real time; compare against a fresh sample.
        if self._now() == event.minutes:
            logging.info(f"[SCHED] {event.name} time reached ({event.time})")
            self.notify(ALERT_TITLE, alert_message(event))
            self.state = LoopState.MATCHED
        else:
            logging.debug(f"[SCHED] Next={event.name} at {event.time}")
            self.state = LoopState.IDLE

        return self.state

    def run(self, max_cycles: Optional[int] = None) -> None:
        """Loop until the stop event is set (or `max_cycles` fetch attempts ran)."""
        logging.info("[SCHED] Poll loop running")
        cycles = 0

        while not self.stop_event.is_set():
            outcome = self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break

            if outcome is LoopState.RETRY_WAIT:
                delay = self.retry_delay
                logging.info(f"[SCHED] Retrying in {delay:.0f}s")
            else:
                self.state = LoopState.SLEEPING
                delay = self.poll_interval

            if self.stop_event.wait(delay):
                break

        self.state = LoopState.STOPPED
        logging.info("[SCHED] Poll loop stopped")

    def stop(self) -> None:
        self.stop_event.set()


def start_prayer_scheduler(loop: PrayerPollLoop) -> threading.Thread:
    t = threading.Thread(target=loop.run, name="prayer-poll", daemon=True)
    t.start()
    logging.info("[SCHED] Scheduler started")
    return t
