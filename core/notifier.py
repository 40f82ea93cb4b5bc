"""
Desktop notifications via plyer.
"""

import logging

from plyer import notification

APP_NAME = "Adhan"


class DesktopNotifier:
    """Best-effort alert sink. Failures are logged, never raised."""

    def __init__(self, app_name: str = APP_NAME, app_icon: str = "", timeout: int = 10):
        self.app_name = app_name
        self.app_icon = app_icon
        self.timeout = timeout

    def notify(self, title: str, message: str) -> bool:
        kwargs = dict(
            app_name=self.app_name,
            title=title,
            message=message,
            timeout=self.timeout,
        )
        if self.app_icon:
            kwargs["app_icon"] = self.app_icon

        try:
            notification.notify(**kwargs)
        except Exception as e:
            logging.warning(f"[NOTIFY] Failed to show notification '{title}': {e}")
            return False

        logging.info(f"[NOTIFY] {title} | {message}")
        return True

    __call__ = notify

    @classmethod
    def from_config(cls, cfg: dict) -> "DesktopNotifier":
        opts = cfg.get("notifications") or {}
        return cls(
            app_name=opts.get("app_name", APP_NAME),
            app_icon=opts.get("app_icon", ""),
            timeout=int(opts.get("timeout", 10)),
        )
