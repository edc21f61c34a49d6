"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Write failures are raised as StoreWriteError, never as backend exceptions.
"""

from abc import ABC, abstractmethod

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
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, created_by: int | None) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        ...


class RegistrationStore(ABC):
    """Interface for the user/event registration relation."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Registration]:
        """Return the user's registrations, oldest first."""
        ...

    @abstractmethod
    def registered_event_ids(self, user_id: int) -> frozenset[EventId]:
        ...

    @abstractmethod
    def get(self, user_id: int, event_id: EventId) -> Registration | None:
        ...

    @abstractmethod
    def add(self, user_id: int, event_id: EventId) -> Registration:
        """Create the relation. Raises AlreadyRegisteredError on a duplicate."""
        ...

    @abstractmethod
    def remove(self, user_id: int, event_id: EventId) -> bool:
        """Delete the relation; return False if nothing was deleted."""
        ...

    @abstractmethod
    def list_missing_ticket(
        self,
        user_id: int | None = None,
        event_id: EventId | None = None,
        limit: int = 5000,
    ) -> list[Registration]:
        """Return registrations whose ticket id is still null."""
        ...

    @abstractmethod
    def attach_ticket(self, registration_id: RegistrationId, ticket: Ticket) -> None:
        ...


class StudentStore(ABC):
    """Interface for roll-number keyed student profiles."""

    @abstractmethod
    def get_by_roll_number(self, roll_number: RollNumber) -> Student | None:
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Student | None:
        ...

    @abstractmethod
    def upsert(self, student: Student) -> Student:
        """Insert or replace the student with the same roll number."""
        ...


class UserStore(ABC):
    """Interface for accounts and their profile rows."""

    @abstractmethod
    def get_profile(self, user_id: int) -> UserProfile | None:
        ...

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        ...

    @abstractmethod
    def create_account(self, name: str, email: str, password: str, role: Role) -> UserProfile:
        ...

    @abstractmethod
    def authenticate(self, email: str, password: str) -> int | None:
        """Return the user id for valid credentials, else None."""
        ...

    @abstractmethod
    def save_contact(self, user_id: int, roll_number: str | None, email: str | None) -> None:
        """Remember (or clear, with None) the student contact for prefill."""
        ...
