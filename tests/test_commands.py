import threading
from datetime import datetime
from unittest.mock import Mock

from core.commands import PROMPT, command_loop, dispatch_command
from utils.prayer_api import ScheduleFetchError


def morning():
    return datetime(2026, 10, 19, 7, 0)


def test_next_reports_upcoming_prayer(schedule, capsys):
    assert dispatch_command("next", Mock(return_value=schedule), clock=morning)
    assert capsys.readouterr().out.strip() == "Next prayer: Dhuhr, Time: 12:15"


def test_all_renders_table(schedule, capsys):
    assert dispatch_command("  all\n", Mock(return_value=schedule), clock=morning)
    out = capsys.readouterr().out
    for name in ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"):
        assert name in out
    assert "19:45" in out


def test_unknown_command(capsys):
    fetch = Mock()
    assert dispatch_command("later", fetch)
    assert capsys.readouterr().out.strip() == "Invalid command"
    fetch.assert_not_called()


def test_quit_does_not_fetch():
    fetch = Mock()
    assert dispatch_command("q", fetch) is False
    fetch.assert_not_called()


def test_fetch_error_is_logged_and_prompt_continues(capsys, caplog):
    fetch = Mock(side_effect=ScheduleFetchError("HTTP 503"))
    assert dispatch_command("next", fetch)
    assert capsys.readouterr().out == ""
    assert "HTTP 503" in caplog.text


def test_loop_runs_commands_until_quit(schedule, capsys):
    stop = threading.Event()
    read_line = Mock(side_effect=["next", "bogus", "q", "next"])
    fetch = Mock(return_value=schedule)

    command_loop(fetch, stop, read_line=read_line, clock=morning)

    assert stop.is_set()
    assert read_line.call_count == 3
    read_line.assert_called_with(PROMPT)
    assert fetch.call_count == 1
    out = capsys.readouterr().out
    assert "Next prayer: Dhuhr" in out
    assert "Invalid command" in out


def test_end_of_input_quits():
    stop = threading.Event()
    command_loop(Mock(), stop, read_line=Mock(side_effect=EOFError))
    assert stop.is_set()


def test_interrupt_during_command_quits_cleanly():
    stop = threading.Event()
    fetch = Mock(side_effect=KeyboardInterrupt)
    read_line = Mock(side_effect=["all", "next"])

    command_loop(fetch, stop, read_line=read_line)

    assert stop.is_set()
    read_line.assert_called_once_with(PROMPT)
