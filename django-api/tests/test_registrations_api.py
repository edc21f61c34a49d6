"""Integration tests for registering, cancelling and the student dashboard.

Run with: pytest tests/test_registrations_api.py -v
"""

import pytest
from rest_framework.test import APIClient

STUDENT_FORM = {
    "roll_number": "21CS042",
    "name": "Asha Rao",
    "email": "asha@gmail.com",
    "mobile": "9876543210",
    "course": "B.Tech CSE",
    "year": "3",
}


@pytest.fixture
def student_client(api_client: APIClient, student_user) -> APIClient:
    api_client.force_authenticate(user=student_user)
    return api_client


def register(client: APIClient, event_id, **overrides):
    return client.post(
        f"/api/events/{event_id}/registration", {**STUDENT_FORM, **overrides}, format="json"
    )


@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/events/{id}/registration"""

    def test_register_for_upcoming_event(self, student_client: APIClient, make_db_event):
        row = make_db_event(days_from_today=5)

        response = register(student_client, row.id)

        assert response.status_code == 201
        body = response.json()
        assert body["registered_event_ids"] == [str(row.id)]
        assert body["event"]["is_registered"] is True
        assert body["event"]["action"] == "cancel_registration"
        assert body["registration"]["ticket"] is None

    def test_student_row_is_saved(self, student_client: APIClient, make_db_event):
        from events.models import Student as StudentRow

        register(student_client, make_db_event(days_from_today=5).id)

        student = StudentRow.objects.get(roll_number="21CS042")
        assert student.year == 3
        assert student.email == "asha@gmail.com"

    def test_requires_login(self, api_client: APIClient, make_db_event):
        response = register(api_client, make_db_event(days_from_today=5).id)
        assert response.status_code == 403

    @pytest.mark.parametrize("days_from_today", [0, -1])
    def test_closed_event_rejected(self, student_client: APIClient, make_db_event, days_from_today):
        from events.models import Registration as RegistrationRow

        response = register(student_client, make_db_event(days_from_today=days_from_today).id)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "REGISTRATION_CLOSED"
        assert not RegistrationRow.objects.exists()

    def test_missing_field_rejected(self, student_client: APIClient, make_db_event):
        response = register(student_client, make_db_event(days_from_today=5).id, mobile="")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "All fields are required"

    def test_double_registration_rejected(self, student_client: APIClient, make_db_event):
        row = make_db_event(days_from_today=5)
        register(student_client, row.id)
        response = register(student_client, row.id)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_REGISTERED"

    def test_year_change_needs_confirmation(self, student_client: APIClient, make_db_event):
        from events.models import Registration as RegistrationRow
        from events.models import Student as StudentRow

        StudentRow.objects.create(
            roll_number="21CS042",
            name="Asha Rao",
            email="asha@gmail.com",
            mobile="9876543210",
            course="B.Tech CSE",
            year=2,
        )
        row = make_db_event(days_from_today=5)

        refused = register(student_client, row.id, year="3")
        assert refused.status_code == 400
        assert refused.json()["error"]["code"] == "YEAR_NOT_CONFIRMED"
        assert StudentRow.objects.get(roll_number="21CS042").year == 2
        assert not RegistrationRow.objects.exists()

        accepted = register(student_client, row.id, year="3", year_confirmed=True)
        assert accepted.status_code == 201
        assert StudentRow.objects.get(roll_number="21CS042").year == 3


@pytest.mark.django_db
class TestCancel:
    """Tests for DELETE /api/events/{id}/registration"""

    def test_register_then_cancel(self, student_client: APIClient, make_db_event):
        row = make_db_event(days_from_today=5)
        register(student_client, row.id)

        response = student_client.delete(f"/api/events/{row.id}/registration")

        assert response.status_code == 200
        body = response.json()
        assert body["registered_event_ids"] == []
        assert body["event"]["action"] == "register_now"

    def test_cancel_without_registration(self, student_client: APIClient, make_db_event):
        response = student_client.delete(f"/api/events/{make_db_event(days_from_today=5).id}/registration")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "NOT_REGISTERED"

    def test_cancel_ongoing_event_rejected(self, student_client: APIClient, make_db_event, student_user):
        from events.models import Registration as RegistrationRow

        row = make_db_event(days_from_today=0)
        RegistrationRow.objects.create(user=student_user, event=row)

        response = student_client.delete(f"/api/events/{row.id}/registration")

        assert response.status_code == 409
        assert RegistrationRow.objects.filter(event=row).exists()


@pytest.mark.django_db
class TestDashboard:
    """Tests for GET /api/me/registrations and /api/me/student"""

    def test_lists_registrations_with_events(self, student_client: APIClient, make_db_event):
        row = make_db_event(days_from_today=5, title="Hackathon")
        register(student_client, row.id)

        [entry] = student_client.get("/api/me/registrations").json()["results"]

        assert entry["event"]["title"] == "Hackathon"
        assert entry["registration"]["event_id"] == str(row.id)

    def test_saved_student_prefill(self, student_client: APIClient, make_db_event):
        register(
            student_client, make_db_event(days_from_today=5).id, remember_contact=True, year_confirmed=True
        )

        body = student_client.get("/api/me/student").json()

        assert body["student"]["roll_number"] == "21CS042"
        assert body["student"]["year"] == 3

    def test_no_saved_student(self, student_client: APIClient):
        assert student_client.get("/api/me/student").json() == {"student": None}
