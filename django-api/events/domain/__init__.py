from events.domain.admission import Action, AdminControls, admin_controls, admissible_action
from events.domain.models import (
    ANONYMOUS,
    Event,
    EventDraft,
    Registration,
    Student,
    Ticket,
    UserProfile,
    ViewerContext,
)
from events.domain.status import STATUS_ORDER, EventStatus, classify
from events.domain.value_objects import EventId, RegistrationId, Role, RollNumber, YearOfStudy

__all__ = [
    "Action",
    "AdminControls",
    "admin_controls",
    "admissible_action",
    "ANONYMOUS",
    "Event",
    "EventDraft",
    "Registration",
    "Student",
    "Ticket",
    "UserProfile",
    "ViewerContext",
    "STATUS_ORDER",
    "EventStatus",
    "classify",
    "EventId",
    "RegistrationId",
    "Role",
    "RollNumber",
    "YearOfStudy",
]
