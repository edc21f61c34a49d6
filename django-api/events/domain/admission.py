"""Which registration or management action an event status permits."""

from dataclasses import dataclass
from enum import Enum

from events.domain.status import EventStatus


class Action(Enum):
    """Control offered to the viewer for one event."""

    REGISTER_NOW = "register_now"
    CANCEL_REGISTRATION = "cancel_registration"
    CLOSED_COMPLETED = "closed_completed"
    CLOSED_ONGOING = "closed_ongoing"
    MANAGE = "manage"
    LOCKED = "locked"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Action.REGISTER_NOW: "Register Now",
    Action.CANCEL_REGISTRATION: "Cancel Registration",
    Action.CLOSED_COMPLETED: "Registration Closed – Event Completed",
    Action.CLOSED_ONGOING: "Registration Closed",
    Action.MANAGE: "Manage Event",
    Action.LOCKED: "You cannot update or delete an ongoing event.",
}

_OPEN_STATUSES = frozenset({EventStatus.UPCOMING, EventStatus.TOMORROW})


@dataclass(frozen=True)
class AdminControls:
    """Management controls available to an admin for one event."""

    can_edit: bool
    can_delete: bool


def admin_controls(status: EventStatus) -> AdminControls:
    if status is EventStatus.ONGOING:
        return AdminControls(can_edit=False, can_delete=False)
    if status is EventStatus.COMPLETED:
        return AdminControls(can_edit=False, can_delete=True)
    return AdminControls(can_edit=True, can_delete=True)


def admissible_action(status: EventStatus, is_registered: bool, is_admin: bool) -> Action:
    """Map an event status and the viewer's context to the permitted action.

    Students may only register for or cancel upcoming and tomorrow's events.
    Admins manage every event except an ongoing one.
    """
    if is_admin:
        return Action.LOCKED if status is EventStatus.ONGOING else Action.MANAGE

    if status is EventStatus.COMPLETED:
        return Action.CLOSED_COMPLETED
    if status not in _OPEN_STATUSES:
        return Action.CLOSED_ONGOING
    if is_registered:
        return Action.CANCEL_REGISTRATION
    return Action.REGISTER_NOW
