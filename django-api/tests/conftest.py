"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Role, UserProfile, ViewerContext
from fakes import (
    InMemoryEventStore,
    InMemoryRegistrationStore,
    InMemoryStudentStore,
    InMemoryUserStore,
)

# Fixed local instant used by service tests: 2025-10-02 11:00 UTC.
NOW = datetime(2025, 10, 2, 11, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def registration_store() -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore()


@pytest.fixture
def student_store() -> InMemoryStudentStore:
    return InMemoryStudentStore()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    store = InMemoryUserStore()
    store.add(UserProfile(user_id=1, name="Asha", email="asha@gmail.com", role=Role.STUDENT))
    store.add(UserProfile(user_id=2, name="Admin", email="admin@gmail.com", role=Role.ADMIN))
    return store


@pytest.fixture
def student_viewer() -> ViewerContext:
    return ViewerContext(user_id=1, role=Role.STUDENT)


@pytest.fixture
def admin_viewer() -> ViewerContext:
    return ViewerContext(user_id=2, role=Role.ADMIN)


def make_account(email: str, role: str = "student", password: str = "pass-1234"):
    from django.contrib.auth import get_user_model

    from events.models import UserProfile as ProfileRow

    user = get_user_model().objects.create_user(username=email, email=email, password=password)
    ProfileRow.objects.create(user=user, name=email.split("@")[0], email=email, role=role)
    return user


@pytest.fixture
def student_user(db):
    return make_account("student@gmail.com")


@pytest.fixture
def admin_user(db):
    return make_account("admin@gmail.com", role="admin")


@pytest.fixture
def frozen_clock(monkeypatch) -> datetime:
    """Pin the clock the request handlers read to NOW."""
    monkeypatch.setattr("events.services.clock.local_now", lambda: NOW)
    return NOW


@pytest.fixture
def local_today(frozen_clock):
    return frozen_clock.date()


@pytest.fixture
def make_db_event(db, local_today):
    from events.models import Event as EventRow

    def factory(days_from_today: int = 7, **fields):
        values = {
            "title": "Tech Fest",
            "date": local_today + timedelta(days=days_from_today),
            "time": "10:00",
            "end_time": "12:00",
            "location": "Auditorium",
            "university_name": "State University",
        }
        values.update(fields)
        return EventRow.objects.create(**values)

    return factory
