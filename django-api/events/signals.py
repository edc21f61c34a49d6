"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.models import Event
from events.stores import cache_keys


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    cache.delete_many([cache_keys.EVENTS_LIST, cache_keys.event_detail(instance.pk)])
