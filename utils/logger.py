# utils/logger.py
import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.path.join("assets", "logs")
LOG_NAME = "adhanwatch.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def resolve_level(level) -> int:
    """Accept a level name from config ("debug", "INFO") or a logging constant."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(log_dir: str = LOG_DIR, level="INFO") -> str:
    """Root logger: daily-rotating file (14 days kept) plus console."""
    level = resolve_level(level)
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_NAME)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [
        TimedRotatingFileHandler(log_path, when="midnight", backupCount=14, encoding="utf-8"),
        logging.StreamHandler(),
    ]

    root = logging.getLogger()
    root.setLevel(level)
    # Drop earlier handlers (avoid duplicates on repeated setup)
    root.handlers.clear()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.info(f"[LOG] Logging initialized ({logging.getLevelName(level)}) → {log_path}")
    return log_path
