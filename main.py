# --- AdhanWatch entry point ---

import argparse
import logging
import sys
import threading
import time
from datetime import datetime

from utils.logger import setup_logging, LOG_DIR
from utils.config_loader import load_config, scheduler_settings, ScheduleSource
from utils.prayer_api import PrayerTimesProvider, ScheduleFetchError

from core.commands import command_loop
from core.notifier import DesktopNotifier
from core.prayer_scheduler import PrayerPollLoop, get_next_prayer, start_prayer_scheduler
from core.schedule import minute_of_day


# GLOBAL FLAGS
stop_flag = threading.Event()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="AdhanWatch: next prayer monitor with desktop alerts.")
    parser.add_argument("--config", default="config.yml", help="Path to the YAML config file.")
    parser.add_argument("--log-dir", default=None, help="Directory for rotating log files (overrides config).")
    return parser.parse_args(argv)


# ========== STARTUP NOTICES ==========
def announce_startup(provider: PrayerTimesProvider, notifier: DesktopNotifier, delay: float = 3):
    notifier("Adhan", "Adhan app is active!")
    time.sleep(delay)

    try:
        schedule = provider.fetch()
    except ScheduleFetchError as e:
        logging.error(f"[CORE] Failed to fetch prayer times: {e}")
        return

    event = get_next_prayer(minute_of_day(datetime.now()), schedule)
    notifier("Adhan", f"Next Prayer is : {event.name} at: {event.time}")


# ========== MAIN ==========
def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)
    log_cfg = cfg.get("logging") or {}
    setup_logging(args.log_dir or log_cfg.get("dir", LOG_DIR), log_cfg.get("level", "INFO"))

    source = ScheduleSource.from_config(cfg)
    provider = PrayerTimesProvider(source)
    notifier = DesktopNotifier.from_config(cfg)

    logging.info(f"[CORE] AdhanWatch started ({source.city}, {source.country}, method={source.method})")

    startup = cfg.get("startup") or {}
    if startup.get("notice", True):
        announce_startup(provider, notifier, float(startup.get("delay", 3)))

    loop = PrayerPollLoop(
        provider.fetch,
        notifier,
        stop_event=stop_flag,
        **scheduler_settings(cfg),
    )
    start_prayer_scheduler(loop)

    command_loop(provider.fetch, stop_flag)

    logging.info("[CORE] AdhanWatch closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
