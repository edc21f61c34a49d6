"""Unit tests for the registration and management admission rules."""

import pytest

from events.domain import Action, EventStatus, admin_controls, admissible_action


class TestStudentRules:
    @pytest.mark.parametrize("registered", [True, False])
    def test_completed_is_closed(self, registered):
        action = admissible_action(EventStatus.COMPLETED, registered, is_admin=False)
        assert action is Action.CLOSED_COMPLETED
        assert action.label == "Registration Closed – Event Completed"

    @pytest.mark.parametrize("status", [EventStatus.ONGOING, EventStatus.TODAY])
    @pytest.mark.parametrize("registered", [True, False])
    def test_same_day_is_closed(self, status, registered):
        action = admissible_action(status, registered, is_admin=False)
        assert action is Action.CLOSED_ONGOING
        assert action.label == "Registration Closed"

    @pytest.mark.parametrize("status", [EventStatus.UPCOMING, EventStatus.TOMORROW])
    def test_open_event_offers_register(self, status):
        assert admissible_action(status, False, is_admin=False) is Action.REGISTER_NOW

    @pytest.mark.parametrize("status", [EventStatus.UPCOMING, EventStatus.TOMORROW])
    def test_registered_student_can_cancel(self, status):
        assert admissible_action(status, True, is_admin=False) is Action.CANCEL_REGISTRATION


class TestAdminRules:
    def test_ongoing_is_locked(self):
        assert admissible_action(EventStatus.ONGOING, False, is_admin=True) is Action.LOCKED
        controls = admin_controls(EventStatus.ONGOING)
        assert not controls.can_edit
        assert not controls.can_delete

    def test_completed_allows_delete_only(self):
        assert admissible_action(EventStatus.COMPLETED, False, is_admin=True) is Action.MANAGE
        controls = admin_controls(EventStatus.COMPLETED)
        assert not controls.can_edit
        assert controls.can_delete

    @pytest.mark.parametrize("status", [EventStatus.TODAY, EventStatus.TOMORROW, EventStatus.UPCOMING])
    def test_open_statuses_allow_edit_and_delete(self, status):
        assert admissible_action(status, True, is_admin=True) is Action.MANAGE
        controls = admin_controls(status)
        assert controls.can_edit
        assert controls.can_delete
