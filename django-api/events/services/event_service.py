"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from events.domain import (
    STATUS_ORDER,
    Action,
    AdminControls,
    Event,
    EventDraft,
    EventId,
    EventStatus,
    ViewerContext,
    admin_controls,
    admissible_action,
    classify,
)
from events.domain.errors import (
    AdminRequiredError,
    EventLockedError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidStatusFilterError,
    ValidationFailedError,
)
from events.domain.status import parse_filter
from events.services.clock import local_now
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

_HIGHLIGHT_STATUSES = frozenset({EventStatus.UPCOMING, EventStatus.TOMORROW})


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


@dataclass(frozen=True)
class EventListing:
    """An event as one viewer sees it at one instant."""

    event: Event
    status: EventStatus
    action: Action
    is_registered: bool
    controls: AdminControls | None


class EventService:
    """Service for the event catalog and its admin management."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = local_now) -> None:
        self._store = store
        self._clock = clock

    def annotate(self, event: Event, viewer: ViewerContext, now: datetime) -> EventListing:
        status = classify(event.date, event.start_time, event.end_time, now)
        is_registered = viewer.is_registered(event.id)
        return EventListing(
            event=event,
            status=status,
            action=admissible_action(status, is_registered, viewer.is_admin),
            is_registered=is_registered,
            controls=admin_controls(status) if viewer.is_admin else None,
        )

    def list_events(self, viewer: ViewerContext, status_filter: str | None = None) -> list[EventListing]:
        """Return events annotated with status, optionally filtered.

        Unfiltered listings are ordered by status (ongoing first, completed
        last) and then by date.

        Raises:
            InvalidStatusFilterError: If the filter names no known status.
        """
        try:
            wanted = parse_filter(status_filter)
        except ValueError as exc:
            raise InvalidStatusFilterError(status_filter or "") from exc

        now = self._clock()
        listings = [self.annotate(event, viewer, now) for event in self._store.list_events()]
        if wanted is not None:
            return [listing for listing in listings if listing.status is wanted]
        return sorted(listings, key=lambda item: (STATUS_ORDER[item.status], item.event.date))

    def highlights(self, viewer: ViewerContext, limit: int = 3) -> list[EventListing]:
        """Return the next events still open for registration, soonest first."""
        now = self._clock()
        listings = [
            listing
            for listing in (self.annotate(event, viewer, now) for event in self._store.list_events())
            if listing.status in _HIGHLIGHT_STATUSES
        ]
        listings.sort(key=lambda item: item.event.date)
        return listings[:limit]

    def get_event(self, event_id: str, viewer: ViewerContext) -> EventListing:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._require_event(parse_event_id(event_id))
        return self.annotate(event, viewer, self._clock())

    def create_event(self, viewer: ViewerContext, draft: EventDraft) -> EventListing:
        self._require_admin(viewer)
        self._check_draft(draft)
        event = self._store.create_event(draft, created_by=viewer.user_id)
        logger.info("Event %s created by user %s", event.id, viewer.user_id)
        return self.annotate(event, viewer, self._clock())

    def update_event(self, viewer: ViewerContext, event_id: str, draft: EventDraft) -> EventListing:
        """Replace an event's fields.

        Raises:
            AdminRequiredError: If the viewer is not an admin.
            EventLockedError: If the event is ongoing or completed.
        """
        self._require_admin(viewer)
        event = self._require_event(parse_event_id(event_id))
        status = classify(event.date, event.start_time, event.end_time, self._clock())
        if not admin_controls(status).can_edit:
            logger.info("Blocked edit of %s event %s", status.value, event.id)
            raise EventLockedError(f"A {status.value} event cannot be updated.")
        self._check_draft(draft)
        updated = self._store.update_event(event.id, draft)
        logger.info("Event %s updated by user %s", event.id, viewer.user_id)
        return self.annotate(updated, viewer, self._clock())

    def delete_event(self, viewer: ViewerContext, event_id: str) -> None:
        """Delete an event.

        Raises:
            AdminRequiredError: If the viewer is not an admin.
            EventLockedError: If the event is ongoing.
        """
        self._require_admin(viewer)
        event = self._require_event(parse_event_id(event_id))
        status = classify(event.date, event.start_time, event.end_time, self._clock())
        if not admin_controls(status).can_delete:
            logger.info("Blocked delete of %s event %s", status.value, event.id)
            raise EventLockedError("You cannot update or delete an ongoing event.")
        self._store.delete_event(event.id)
        logger.info("Event %s deleted by user %s", event.id, viewer.user_id)

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    @staticmethod
    def _require_admin(viewer: ViewerContext) -> None:
        if not viewer.is_admin:
            raise AdminRequiredError()

    @staticmethod
    def _check_draft(draft: EventDraft) -> None:
        if not draft.title.strip():
            raise ValidationFailedError("Title is required")
        if draft.end_time is not None and draft.end_time < draft.start_time:
            raise ValidationFailedError("End time must not be before start time")
