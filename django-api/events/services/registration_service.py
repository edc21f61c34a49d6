"""Student registration and cancellation.

A registration is only written after the student's profile has been captured
and, when the stored year of study changes, explicitly confirmed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from events.domain import (
    Action,
    Event,
    EventId,
    Registration,
    RollNumber,
    Student,
    ViewerContext,
    YearOfStudy,
    admissible_action,
    classify,
)
from events.domain.errors import (
    AlreadyRegisteredError,
    EventNotFoundError,
    InvalidEmailError,
    NotRegisteredError,
    RegistrationClosedError,
    StoreWriteError,
    ValidationFailedError,
    YearNotConfirmedError,
)
from events.domain.validation import is_valid_email
from events.services.clock import local_now
from events.services.event_service import EventListing, EventService, parse_event_id
from events.stores.interfaces import EventStore, RegistrationStore, StudentStore, UserStore

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("roll_number", "name", "email", "mobile", "course", "year")


@dataclass(frozen=True)
class StudentDetails:
    """Raw student form values as submitted."""

    roll_number: str
    name: str
    email: str
    mobile: str
    course: str
    year: int | str

    def to_student(self) -> Student:
        """Validate every field and build the Student.

        Raises:
            ValidationFailedError: If a field is missing or the year is invalid.
            InvalidEmailError: If the email is malformed.
        """
        missing = [name for name in _REQUIRED_FIELDS if not str(getattr(self, name) or "").strip()]
        if missing:
            raise ValidationFailedError("All fields are required")
        if not is_valid_email(self.email):
            raise InvalidEmailError("Please enter a valid email address.")
        try:
            year = YearOfStudy.parse(self.year)
        except ValueError as exc:
            raise ValidationFailedError("Year of study must be a positive number") from exc
        return Student(
            roll_number=RollNumber(self.roll_number),
            name=self.name.strip(),
            email=self.email.strip(),
            mobile=self.mobile.strip(),
            course=self.course.strip(),
            year=year,
        )


@dataclass(frozen=True)
class DashboardEntry:
    registration: Registration
    listing: EventListing


class RegistrationService:
    """Service for the registration relation and the student profile capture."""

    def __init__(
        self,
        events: EventStore,
        registrations: RegistrationStore,
        students: StudentStore,
        users: UserStore,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._events = events
        self._registrations = registrations
        self._students = students
        self._users = users
        self._clock = clock

    def registered_event_ids(self, user_id: int) -> frozenset[EventId]:
        return self._registrations.registered_event_ids(user_id)

    def register(
        self,
        viewer: ViewerContext,
        event_id: str,
        details: StudentDetails,
        year_confirmed: bool = False,
        remember_contact: bool = False,
    ) -> Registration:
        """Register the viewer for an event after saving their student profile.

        Raises:
            ValidationFailedError, InvalidEmailError: Bad student details.
            InvalidEventIdError, EventNotFoundError: Unknown event.
            AlreadyRegisteredError: The viewer is already registered.
            RegistrationClosedError: The event is no longer open.
            YearNotConfirmedError: The year was not confirmed although the stored
                year differs or the details are to be remembered.
        """
        student = details.to_student()
        event = self._require_event(event_id)
        is_registered = self._registrations.get(viewer.user_id, event.id) is not None
        action = self._student_action(event, is_registered)
        if action is Action.CANCEL_REGISTRATION:
            raise AlreadyRegisteredError()
        if action is not Action.REGISTER_NOW:
            logger.info("Registration for event %s refused: %s", event.id, action.value)
            raise RegistrationClosedError(action.label)

        existing = self._students.get_by_roll_number(student.roll_number)
        year_changed = existing is not None and existing.year != student.year
        if (year_changed or remember_contact) and not year_confirmed:
            logger.info("Year of study for %s awaiting confirmation", student.roll_number)
            raise YearNotConfirmedError(
                existing.year.value if existing is not None else None, student.year.value
            )

        self._students.upsert(student)
        registration = self._registrations.add(viewer.user_id, event.id)
        logger.info("User %s registered for event %s", viewer.user_id, event.id)

        self._remember_contact(viewer.user_id, student, remember_contact)
        return registration

    def cancel(self, viewer: ViewerContext, event_id: str) -> None:
        """Cancel the viewer's registration.

        Raises:
            NotRegisteredError: The viewer has no registration for the event.
            RegistrationClosedError: The event is no longer open.
        """
        event = self._require_event(event_id)
        is_registered = self._registrations.get(viewer.user_id, event.id) is not None
        action = self._student_action(event, is_registered)
        if action is Action.REGISTER_NOW:
            raise NotRegisteredError()
        if action is not Action.CANCEL_REGISTRATION:
            raise RegistrationClosedError(action.label)
        if not self._registrations.remove(viewer.user_id, event.id):
            raise NotRegisteredError()
        logger.info("User %s cancelled registration for event %s", viewer.user_id, event.id)

    def dashboard(self, viewer: ViewerContext) -> list[DashboardEntry]:
        """Return the viewer's registrations with their events as of now."""
        annotator = EventService(self._events, clock=self._clock)
        now = self._clock()
        entries = []
        for registration in self._registrations.list_for_user(viewer.user_id):
            event = self._events.get_event(registration.event_id)
            if event is None:
                continue
            entries.append(
                DashboardEntry(
                    registration=registration,
                    listing=annotator.annotate(event, viewer, now),
                )
            )
        return entries

    def saved_student(self, viewer: ViewerContext) -> Student | None:
        """Look up the student record remembered on the viewer's profile."""
        profile = self._users.get_profile(viewer.user_id)
        if profile is None:
            return None
        if profile.saved_roll:
            return self._students.get_by_roll_number(RollNumber(profile.saved_roll))
        if profile.saved_email:
            return self._students.get_by_email(profile.saved_email)
        return None

    def _require_event(self, event_id: str) -> Event:
        parsed = parse_event_id(event_id)
        event = self._events.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _student_action(self, event: Event, is_registered: bool) -> Action:
        status = classify(event.date, event.start_time, event.end_time, self._clock())
        return admissible_action(status, is_registered, is_admin=False)

    def _remember_contact(self, user_id: int, student: Student, remember: bool) -> None:
        roll, email = (student.roll_number.value, student.email) if remember else (None, None)
        try:
            self._users.save_contact(user_id, roll, email)
        except StoreWriteError:
            logger.warning("Could not update saved contact for user %s", user_id, exc_info=True)
