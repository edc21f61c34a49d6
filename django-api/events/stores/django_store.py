"""Django ORM implementations of the store interfaces."""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.core.cache import cache
from django.db import DatabaseError, IntegrityError, transaction

from events import models
from events.domain import (
    Event,
    EventDraft,
    EventId,
    Registration,
    RegistrationId,
    Role,
    RollNumber,
    Student,
    Ticket,
    UserProfile,
    YearOfStudy,
)
from events.domain.errors import AlreadyRegisteredError, EmailTakenError, StoreWriteError
from events.stores import cache_keys
from events.stores.interfaces import EventStore, RegistrationStore, StudentStore, UserStore

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description or "",
        date=row.date,
        start_time=row.time,
        end_time=row.end_time,
        location=row.location or "",
        university_name=row.university_name or "",
        image_url=row.image or None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_registration(row: models.Registration) -> Registration:
    ticket = None
    if row.ticket_id:
        ticket = Ticket(
            ticket_id=row.ticket_id,
            qr_data_url=row.ticket_qr,
            issued_at=row.ticket_issued_at,
        )
    return Registration(
        id=RegistrationId(row.id),
        user_id=row.user_id,
        event_id=EventId(row.event_id),
        created_at=row.created_at,
        ticket=ticket,
    )


def _to_student(row: models.Student) -> Student:
    return Student(
        roll_number=RollNumber(row.roll_number),
        name=row.name,
        email=row.email,
        mobile=row.mobile,
        course=row.course,
        year=YearOfStudy(row.year),
    )


def _to_profile(row: models.UserProfile) -> UserProfile:
    return UserProfile(
        user_id=row.user_id,
        name=row.name,
        email=row.email,
        role=Role.parse(row.role),
        saved_roll=row.saved_roll,
        saved_email=row.saved_email,
    )


def _apply_draft(row: models.Event, draft: EventDraft) -> None:
    row.title = draft.title
    row.description = draft.description
    row.date = draft.date
    row.time = draft.start_time
    row.end_time = draft.end_time
    row.location = draft.location
    row.university_name = draft.university_name
    row.image = draft.image_url


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM, with cached reads."""

    def list_events(self) -> list[Event]:
        return cache.get_or_set(
            cache_keys.EVENTS_LIST,
            lambda: [_to_event(row) for row in models.Event.objects.all()],
        )

    def get_event(self, event_id: EventId) -> Event | None:
        key = cache_keys.event_detail(event_id)
        event = cache.get(key)
        if event is None:
            row = models.Event.objects.filter(pk=event_id.value).first()
            if row is None:
                return None
            event = _to_event(row)
            cache.set(key, event)
        return event

    def create_event(self, draft: EventDraft, created_by: int | None) -> Event:
        row = models.Event(created_by_id=created_by)
        _apply_draft(row, draft)
        try:
            row.save()
        except DatabaseError as exc:
            logger.exception("Event insert failed")
            raise StoreWriteError("create the event") from exc
        return _to_event(row)

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        try:
            row = models.Event.objects.get(pk=event_id.value)
            _apply_draft(row, draft)
            row.save()
        except DatabaseError as exc:
            logger.exception("Event update failed for %s", event_id)
            raise StoreWriteError("update the event") from exc
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> None:
        try:
            for row in models.Event.objects.filter(pk=event_id.value):
                row.delete()
        except DatabaseError as exc:
            logger.exception("Event delete failed for %s", event_id)
            raise StoreWriteError("delete the event") from exc


class DjangoRegistrationStore(RegistrationStore):
    def list_for_user(self, user_id: int) -> list[Registration]:
        rows = models.Registration.objects.filter(user_id=user_id)
        return [_to_registration(row) for row in rows]

    def registered_event_ids(self, user_id: int) -> frozenset[EventId]:
        ids = models.Registration.objects.filter(user_id=user_id).values_list("event_id", flat=True)
        return frozenset(EventId(value) for value in ids)

    def get(self, user_id: int, event_id: EventId) -> Registration | None:
        row = models.Registration.objects.filter(user_id=user_id, event_id=event_id.value).first()
        return _to_registration(row) if row is not None else None

    def add(self, user_id: int, event_id: EventId) -> Registration:
        try:
            with transaction.atomic():
                row = models.Registration.objects.create(user_id=user_id, event_id=event_id.value)
        except IntegrityError as exc:
            raise AlreadyRegisteredError() from exc
        except DatabaseError as exc:
            logger.exception("Registration insert failed for user %s event %s", user_id, event_id)
            raise StoreWriteError("register for the event") from exc
        return _to_registration(row)

    def remove(self, user_id: int, event_id: EventId) -> bool:
        try:
            deleted, _ = models.Registration.objects.filter(
                user_id=user_id, event_id=event_id.value
            ).delete()
        except DatabaseError as exc:
            logger.exception("Registration delete failed for user %s event %s", user_id, event_id)
            raise StoreWriteError("cancel the registration") from exc
        return deleted > 0

    def list_missing_ticket(
        self,
        user_id: int | None = None,
        event_id: EventId | None = None,
        limit: int = 5000,
    ) -> list[Registration]:
        query = models.Registration.objects.filter(ticket_id__isnull=True)
        if user_id is not None:
            query = query.filter(user_id=user_id)
        if event_id is not None:
            query = query.filter(event_id=event_id.value)
        return [_to_registration(row) for row in query[:limit]]

    def attach_ticket(self, registration_id: RegistrationId, ticket: Ticket) -> None:
        try:
            models.Registration.objects.filter(pk=registration_id.value).update(
                ticket_id=ticket.ticket_id,
                ticket_qr=ticket.qr_data_url,
                ticket_issued_at=ticket.issued_at,
            )
        except DatabaseError as exc:
            raise StoreWriteError("attach the ticket") from exc


class DjangoStudentStore(StudentStore):
    def get_by_roll_number(self, roll_number: RollNumber) -> Student | None:
        row = models.Student.objects.filter(roll_number=roll_number.value).first()
        return _to_student(row) if row is not None else None

    def get_by_email(self, email: str) -> Student | None:
        row = models.Student.objects.filter(email__iexact=email.strip()).first()
        return _to_student(row) if row is not None else None

    def upsert(self, student: Student) -> Student:
        try:
            row, _ = models.Student.objects.update_or_create(
                roll_number=student.roll_number.value,
                defaults={
                    "name": student.name,
                    "email": student.email,
                    "mobile": student.mobile,
                    "course": student.course,
                    "year": student.year.value,
                },
            )
        except DatabaseError as exc:
            logger.exception("Student upsert failed for %s", student.roll_number)
            raise StoreWriteError("save your student details") from exc
        return _to_student(row)


class DjangoUserStore(UserStore):
    """Accounts backed by django.contrib.auth, with one profile row each."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        row = models.UserProfile.objects.filter(user_id=user_id).first()
        return _to_profile(row) if row is not None else None

    def email_exists(self, email: str) -> bool:
        return get_user_model().objects.filter(username=email).exists()

    def create_account(self, name: str, email: str, password: str, role: Role) -> UserProfile:
        try:
            with transaction.atomic():
                user = get_user_model().objects.create_user(
                    username=email, email=email, password=password
                )
                row = models.UserProfile.objects.create(
                    user=user, name=name, email=email, role=role.value
                )
        except IntegrityError as exc:
            raise EmailTakenError() from exc
        except DatabaseError as exc:
            logger.exception("Account creation failed")
            raise StoreWriteError("create your account") from exc
        return _to_profile(row)

    def authenticate(self, email: str, password: str) -> int | None:
        user = authenticate(username=email, password=password)
        return user.pk if user is not None else None

    def save_contact(self, user_id: int, roll_number: str | None, email: str | None) -> None:
        try:
            models.UserProfile.objects.filter(user_id=user_id).update(
                saved_roll=roll_number, saved_email=email
            )
        except DatabaseError as exc:
            raise StoreWriteError("remember your contact details") from exc
