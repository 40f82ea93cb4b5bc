from unittest.mock import patch

from core.notifier import DesktopNotifier


@patch("core.notifier.notification")
def test_notify_passes_title_and_message(mock_notification):
    notifier = DesktopNotifier(app_name="Adhan", timeout=5)

    assert notifier("Prayer Time", "It's time for Asr prayer.")

    mock_notification.notify.assert_called_once_with(
        app_name="Adhan",
        title="Prayer Time",
        message="It's time for Asr prayer.",
        timeout=5,
    )


@patch("core.notifier.notification")
def test_icon_only_when_configured(mock_notification):
    DesktopNotifier(app_icon="assets/mosque.png").notify("Adhan", "hello")
    assert mock_notification.notify.call_args[1]["app_icon"] == "assets/mosque.png"


@patch("core.notifier.notification")
def test_failure_is_logged_not_raised(mock_notification, caplog):
    mock_notification.notify.side_effect = NotImplementedError("no backend")

    assert DesktopNotifier().notify("Prayer Time", "It's time for Isha prayer.") is False
    assert "no backend" in caplog.text


def test_from_config():
    notifier = DesktopNotifier.from_config({"notifications": {"app_name": "Masjid", "timeout": "30"}})
    assert notifier.app_name == "Masjid"
    assert notifier.timeout == 30
    assert notifier.app_icon == ""


def test_from_config_defaults():
    notifier = DesktopNotifier.from_config({})
    assert notifier.app_name == "Adhan"
    assert notifier.timeout == 10
