"""Event lifecycle status, derived from the event's date and time window.

Status is never stored. It is recomputed against the current local time on
every read.
"""

from datetime import date, datetime, time
from enum import Enum


class EventStatus(Enum):
    """Lifecycle state of an event relative to now."""

    ONGOING = "ongoing"
    TODAY = "today"
    TOMORROW = "tomorrow"
    UPCOMING = "upcoming"
    COMPLETED = "completed"


# Listing order: live events first, finished events last.
STATUS_ORDER = {
    EventStatus.ONGOING: 0,
    EventStatus.TODAY: 1,
    EventStatus.TOMORROW: 2,
    EventStatus.UPCOMING: 3,
    EventStatus.COMPLETED: 4,
}


def parse_wall_clock(value: time | str | None) -> time | None:
    """Return a wall-clock time from "HH:MM" / "HH:MM:SS" or a time object.

    Blank values are treated as missing. Raises ValueError for malformed input.
    """
    if value is None or isinstance(value, time):
        return value
    text = value.strip()
    if not text:
        return None
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid time format: {value!r}")
    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    return time(hour, minute, second)


def classify(
    event_date: date,
    start_time: time | str | None,
    end_time: time | str | None,
    now: datetime,
) -> EventStatus:
    """Classify an event against ``now``.

    Day difference is computed on calendar dates only, so the time of day in
    ``now`` never changes it. The start/end window is only consulted on the
    event's own day, and both bounds are inclusive.
    """
    day_diff = (event_date - now.date()).days

    if day_diff < 0:
        return EventStatus.COMPLETED
    if day_diff == 1:
        return EventStatus.TOMORROW
    if day_diff == 0:
        start = parse_wall_clock(start_time)
        end = parse_wall_clock(end_time)
        if start is not None and end is not None:
            event_start = datetime.combine(event_date, start, tzinfo=now.tzinfo)
            event_end = datetime.combine(event_date, end, tzinfo=now.tzinfo)
            if event_start <= now <= event_end:
                return EventStatus.ONGOING
            if now > event_end:
                return EventStatus.COMPLETED
        return EventStatus.TODAY
    return EventStatus.UPCOMING


def parse_filter(raw: str | None) -> EventStatus | None:
    """Parse a listing filter; "all" or empty means no filter."""
    if raw is None or raw.strip().lower() in ("", "all"):
        return None
    return EventStatus(raw.strip().lower())
