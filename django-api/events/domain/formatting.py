"""Display formatting for event dates and time windows."""

from datetime import date, time


def format_date(value: date) -> str:
    """e.g. ``02 October 2025``."""
    return value.strftime("%d %B %Y")


def to_12_hour(value: time | None) -> str:
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_time_range(start: time | None, end: time | None) -> str:
    """e.g. ``10:00 AM - 12:00 PM``, or just the start when there is no end."""
    if end is None:
        return to_12_hour(start)
    return f"{to_12_hour(start)} - {to_12_hour(end)}"
