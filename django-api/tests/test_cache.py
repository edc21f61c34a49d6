"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from events.domain import EventId, EventStatus
from events.stores import cache_keys
from events.stores.django_store import DjangoEventStore


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, make_db_event):
        """Saving an event invalidates the events:list cache key."""
        row = make_db_event()
        DjangoEventStore().list_events()
        assert cache.get(cache_keys.EVENTS_LIST) is not None

        row.title = "Renamed"
        row.save()

        assert cache.get(cache_keys.EVENTS_LIST) is None
        assert DjangoEventStore().list_events()[0].title == "Renamed"

    def test_event_save_invalidates_detail_cache(self, make_db_event):
        """Saving an event invalidates the events:{id} cache key."""
        row = make_db_event()
        event_id = EventId(row.id)
        DjangoEventStore().get_event(event_id)
        assert cache.get(cache_keys.event_detail(event_id)) is not None

        row.title = "Renamed"
        row.save()

        assert cache.get(cache_keys.event_detail(event_id)) is None

    def test_event_delete_invalidates_caches(self, make_db_event):
        row = make_db_event()
        event_id = EventId(row.id)
        store = DjangoEventStore()
        store.list_events()
        store.get_event(event_id)

        row.delete()

        assert store.list_events() == []
        assert store.get_event(event_id) is None


@pytest.mark.django_db
class TestStatusIsNeverCached:
    def test_status_changes_with_clock_on_cached_rows(self, api_client, make_db_event, monkeypatch, frozen_clock):
        row = make_db_event(days_from_today=0)
        first = api_client.get(f"/api/events/{row.id}").json()
        assert first["status"] == EventStatus.ONGOING.value

        later = frozen_clock.replace(hour=12, minute=1)
        monkeypatch.setattr("events.services.clock.local_now", lambda: later)

        second = api_client.get(f"/api/events/{row.id}").json()
        assert second["status"] == EventStatus.COMPLETED.value
