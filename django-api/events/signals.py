"""Event collection change signal and cache invalidation.

The store sends ``events_changed`` after every persisted mutation with the
new snapshot (``events``) and the id the mutation targeted (``event_id``).
"""

from django.core.cache import cache
from django.dispatch import Signal, receiver

from events.cache_keys import EVENT_LIST_KEY, event_detail_key

events_changed = Signal()


@receiver(events_changed)
def invalidate_event_cache(sender, events, event_id=None, **kwargs):
    """Invalidate cached API responses when the collection changes."""
    keys = [EVENT_LIST_KEY]
    if event_id is not None:
        keys.append(event_detail_key(event_id))
    cache.delete_many(keys)
