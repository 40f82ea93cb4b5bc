"""
Interactive command prompt.

Each command does its own fetch; nothing is shared with the poll loop.
"""

import logging
import threading
from datetime import datetime
from typing import Callable

from core.display import display_prayer_times, show_next_prayer
from core.prayer_scheduler import get_next_prayer
from core.schedule import Schedule, minute_of_day
from utils.prayer_api import ScheduleFetchError

PROMPT = "Enter a command (or 'q' to quit): "
QUIT = "q"


def dispatch_command(
        command: str,
        fetch_schedule: Callable[[], Schedule],
        clock: Callable[[], datetime] = datetime.now,
) -> bool:
    """Run one command. Returns False when the user asked to quit."""
    command = command.strip()

    if command == QUIT:
        return False

    if command not in ("next", "all"):
        print("Invalid command")
        return True

    try:
        schedule = fetch_schedule()
    except ScheduleFetchError as e:
        logging.error(f"[CLI] Failed to fetch prayer times: {e}")
        return True

    if command == "next":
        show_next_prayer(get_next_prayer(minute_of_day(clock()), schedule))
    else:
        display_prayer_times(schedule)
    return True


def command_loop(
        fetch_schedule: Callable[[], Schedule],
        stop_event: threading.Event,
        read_line: Callable[[str], str] = input,
        clock: Callable[[], datetime] = datetime.now,
) -> None:
    """Read commands until 'q' (or end of input), then set `stop_event`."""
    try:
        while not stop_event.is_set():
            try:
                line = read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                break

            try:
                if not dispatch_command(line, fetch_schedule, clock):
                    break
            except KeyboardInterrupt:
                print()
                break
    finally:
        logging.info("[CLI] Quit requested")
        stop_event.set()
