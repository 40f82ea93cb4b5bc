"""
Console output: next-prayer status line and the prayer timings table.
"""

from tabulate import tabulate

from core.schedule import PrayerEvent, Schedule


def format_next_prayer(event: PrayerEvent) -> str:
    return f"Next prayer: {event.name}, Time: {event.time}"


def show_next_prayer(event: PrayerEvent) -> None:
    print(format_next_prayer(event))


def render_prayer_times(schedule: Schedule) -> str:
    """Prayers in the first column pair, informational timings in the second."""
    prayer_rows = [[e.name, e.time] for e in schedule.events]
    other_rows = [[name, value] for name, value in schedule.extras]

    table = [
        (prayer_rows[i] if i < len(prayer_rows) else ["", ""])
        + (other_rows[i] if i < len(other_rows) else ["", ""])
        for i in range(max(len(prayer_rows), len(other_rows)))
    ]

    if other_rows:
        headers = ["Prayer", "Time", "Other", "Time"]
    else:
        headers = ["Prayer", "Time"]
        table = [row[:2] for row in table]

    title = f"Prayer Timings ({schedule.date})" if schedule.date else "Prayer Timings"
    return f"\n{title}\n" + tabulate(
        table,
        headers=headers,
        tablefmt="fancy_grid",
        colalign=["center"] * len(headers),
    )


def display_prayer_times(schedule: Schedule) -> None:
    """Pretty-print prayer times in a formatted table."""
    print(render_prayer_times(schedule))
