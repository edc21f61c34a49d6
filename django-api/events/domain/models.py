"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from events.domain.value_objects import EventId, RegistrationId, Role, RollNumber, YearOfStudy


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: date
    start_time: time | None
    end_time: time | None
    location: str
    university_name: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventDraft:
    """Field values for creating or replacing an Event."""

    title: str
    date: date
    start_time: time
    end_time: time | None = None
    description: str = ""
    location: str = ""
    university_name: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class Ticket:
    """Ticket attached to a registration by the backfill utility."""

    ticket_id: str
    qr_data_url: str | None
    issued_at: datetime


@dataclass(frozen=True)
class Registration:
    """Domain representation of a user's registration for an event."""

    id: RegistrationId
    user_id: int
    event_id: EventId
    created_at: datetime
    ticket: Ticket | None = None


@dataclass(frozen=True)
class Student:
    """Student profile, keyed by roll number."""

    roll_number: RollNumber
    name: str
    email: str
    mobile: str
    course: str
    year: YearOfStudy


@dataclass(frozen=True)
class UserProfile:
    """Profile row for an authenticated identity."""

    user_id: int
    name: str
    email: str
    role: Role
    saved_roll: str | None = None
    saved_email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class ViewerContext:
    """Who is looking at a page: resolved once per request."""

    user_id: int | None = None
    role: Role | None = None
    registered_event_ids: frozenset[EventId] = frozenset()

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def is_registered(self, event_id: EventId) -> bool:
        return event_id in self.registered_event_ids


ANONYMOUS = ViewerContext()
