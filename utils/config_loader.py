import yaml
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://api.aladhan.com/v1/timingsByCity"


def load_config(config_path: str = "config.yml") -> dict:
    """Load YAML configuration file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found at {config_file.resolve()}")
    with open(config_file, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class ScheduleSource:
    """Location and calculation method the schedule is fetched for."""

    city: str
    country: str
    method: int
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0

    @classmethod
    def from_config(cls, cfg: dict) -> "ScheduleSource":
        settings = cfg.get("settings") or {}
        api = cfg.get("api") or {}
        return cls(
            city=settings["city"],
            country=settings["country"],
            method=int(settings.get("method", 3)),
            api_url=api.get("url", DEFAULT_API_URL),
            timeout=float(api.get("timeout", 10)),
        )


def scheduler_settings(cfg: dict) -> dict:
    """Poll cadence and retry delay, in seconds."""
    sched = cfg.get("scheduler") or {}
    return {
        "poll_interval": float(sched.get("poll_interval", 60)),
        "retry_delay": float(sched.get("retry_delay", 60)),
    }
